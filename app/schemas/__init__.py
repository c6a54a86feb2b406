"""Pydantic schemas for request/response validation."""

from app.schemas.auth import (
    ErrorResponse,
    SessionResponse,
    SignupRequest,
    SignupResponse,
    UserRead,
    WorkspaceRead,
)

__all__ = [
    "ErrorResponse",
    "SessionResponse",
    "SignupRequest",
    "SignupResponse",
    "UserRead",
    "WorkspaceRead",
]
