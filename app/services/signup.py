"""Signup orchestration: validate, check uniqueness, hash, write user + workspace atomically.

Steps are hard gates; the first failure stops the flow:

1. Credential rules (email shape, password length, workspace name).
2. Email uniqueness pre-check. This is a fast path only: a concurrent signup
   can still race past it, so a unique-constraint violation at write time is
   mapped to the same DuplicateEmailError.
3. bcrypt hash.
4. One transaction: user row, workspace row, membership link. Any failure
   rolls back everything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import DuplicateEmailError, PasswordHashingError, SignupFailedError
from app.models import User, Workspace
from app.services import account_store
from app.services.credentials import validate_credentials
from app.services.passwords import hash_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupResult:
    """Rows created by a successful signup."""

    user: User
    workspace: Workspace


def signup(db: Session, email: str, password: str, workspace_name: str) -> SignupResult:
    """Create a user and their first workspace.

    Raises:
        CredentialValidationError: email, password or workspace name is invalid.
        DuplicateEmailError: the email is already registered (any case).
        SignupFailedError: hashing, a write, the commit or the rollback failed.
    """
    validate_credentials(email, password, workspace_name)
    normalized_email = email.lower()

    try:
        exists = account_store.email_exists(db, normalized_email)
    except SQLAlchemyError as exc:
        logger.exception("Email existence check failed")
        raise SignupFailedError("failed to check email existence") from exc
    if exists:
        logger.info("Signup rejected: email already registered")
        raise DuplicateEmailError(normalized_email)

    try:
        password_hash = hash_password(password)
    except PasswordHashingError as exc:
        logger.warning("Signup rejected: password could not be hashed")
        raise SignupFailedError("failed to hash password") from exc

    try:
        with account_store.transaction(db):
            user = account_store.create_user(db, normalized_email, password_hash)
            workspace = account_store.create_workspace(db, workspace_name)
            account_store.link_user_to_workspace(db, user, workspace)
    except IntegrityError as exc:
        if account_store.is_email_conflict(exc):
            logger.info("Signup rejected: email registered concurrently")
            raise DuplicateEmailError(normalized_email) from exc
        logger.exception("Signup write violated a constraint")
        raise SignupFailedError("failed to create account") from exc
    except SQLAlchemyError as exc:
        logger.exception("Signup transaction failed")
        raise SignupFailedError("failed to create account") from exc

    logger.info("Created user id=%s with workspace id=%s", user.id, workspace.id)
    return SignupResult(user=user, workspace=workspace)
