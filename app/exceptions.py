"""Domain exceptions for signup and sessions.

Each carries a stable machine-readable ``code`` and the HTTP status the API
layer renders it with. 4xx errors are expected outcomes; 5xx errors are logged
and shown to clients without internal detail.
"""

from __future__ import annotations

from typing import Any


class FinSightError(Exception):
    """Base exception for the FinSight backend."""

    code: str = "INTERNAL_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to an API error body."""
        body: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


# ---------------------------------------------------------------------------
# Expected (4xx)
# ---------------------------------------------------------------------------


class ValidationError(FinSightError):
    """Input has the wrong shape."""

    code = "VALIDATION_ERROR"
    status_code = 400


class CredentialValidationError(ValidationError):
    """Email, password or workspace name failed a credential rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, details={"field": field})
        self.field = field


class DuplicateEmailError(FinSightError):
    """An account with this email already exists."""

    code = "EMAIL_EXISTS"
    status_code = 409

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email already registered",
            details={
                "field": "email",
                "message": "An account with this email already exists",
            },
        )
        self.email = email


class UnauthenticatedError(FinSightError):
    """No valid session on the request."""

    code = "UNAUTHENTICATED"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Not authenticated", details={"message": "No active session found"})


# ---------------------------------------------------------------------------
# Unexpected (5xx)
# ---------------------------------------------------------------------------


class SignupFailedError(FinSightError):
    """The account could not be written (transaction begin/write/commit/rollback)."""

    def __init__(self, message: str = "Failed to create account") -> None:
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        # Internal cause stays in logs
        return {"error": "Failed to create account", "code": self.code}


class SessionIssueError(FinSightError):
    """The session token or cookie could not be produced."""

    def __init__(self, message: str = "Failed to create session") -> None:
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": "Failed to create session", "code": self.code}


class PasswordHashingError(FinSightError):
    """bcrypt refused to hash the input."""


class MalformedHashError(FinSightError):
    """A stored value is not a bcrypt hash."""
