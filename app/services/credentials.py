"""Credential rules for signup. Pure functions; raise on the first violation."""

from __future__ import annotations

import re

from app.exceptions import CredentialValidationError
from app.services.passwords import MAX_PASSWORD_BYTES

MIN_PASSWORD_LENGTH = 8

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def validate_email(email: str) -> None:
    """Check local@domain.tld shape. No DNS or mailbox lookup."""
    if not EMAIL_PATTERN.fullmatch(email):
        raise CredentialValidationError("email", "invalid email format")


def validate_password(password: str) -> None:
    """At least MIN_PASSWORD_LENGTH characters, at most MAX_PASSWORD_BYTES bytes."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise CredentialValidationError(
            "password",
            f"password must be at least {MIN_PASSWORD_LENGTH} characters",
        )
    # bcrypt input limit
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise CredentialValidationError(
            "password",
            f"password must be at most {MAX_PASSWORD_BYTES} bytes",
        )


def validate_workspace_name(name: str) -> None:
    # Whitespace-only names are accepted; no trimming
    if name == "":
        raise CredentialValidationError("workspaceName", "workspace name is required")


def validate_credentials(email: str, password: str, workspace_name: str) -> None:
    """Run the signup checks in order: email, password, workspace name."""
    validate_email(email)
    validate_password(password)
    validate_workspace_name(workspace_name)
