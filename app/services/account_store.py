"""User/workspace persistence. Writes flush only; callers commit via transaction()."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import SignupFailedError
from app.models import User, UserWorkspace, Workspace

logger = logging.getLogger(__name__)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Unit of work: commit on normal exit, roll back on any exception.

    The commit runs inside the guarded block, so a failed commit is rolled back
    too. If the rollback itself fails, both errors are reported together as
    SignupFailedError.
    """
    try:
        yield db
        db.commit()
    except Exception as exc:
        try:
            db.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error("Rollback failed after %s: %s", type(exc).__name__, rollback_exc)
            raise SignupFailedError(
                f"rollback error: {rollback_exc}, original error: {exc}"
            ) from exc
        raise


def email_exists(db: Session, email: str) -> bool:
    """Return True if any user has this email (case-insensitive)."""
    stmt = select(User.id).where(func.lower(User.email) == email.lower()).limit(1)
    return db.execute(stmt).first() is not None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Return the user with this email (case-insensitive), or None."""
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def create_user(db: Session, email: str, password_hash: str) -> User:
    """Insert a user row. Email is lower-cased by the model."""
    user = User(email=email, password_hash=password_hash)
    db.add(user)
    db.flush()
    return user


def create_workspace(db: Session, name: str) -> Workspace:
    """Insert a workspace row."""
    workspace = Workspace(name=name)
    db.add(workspace)
    db.flush()
    return workspace


def link_user_to_workspace(db: Session, user: User, workspace: Workspace) -> UserWorkspace:
    """Add user as a member of workspace."""
    link = UserWorkspace(user_id=user.id, workspace_id=workspace.id)
    db.add(link)
    db.flush()
    return link


def is_email_conflict(exc: IntegrityError) -> bool:
    """True if the integrity error came from a users.email uniqueness constraint."""
    orig = exc.orig
    diag = getattr(orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None) if diag is not None else None
    if constraint:
        return constraint in ("uq_users_email", "uq_users_email_lower")
    message = str(orig).lower()
    return "unique" in message and "email" in message
