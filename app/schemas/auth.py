"""Authentication schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime) -> str:
    """Render as UTC YYYY-MM-DDTHH:MM:SSZ. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


class SignupRequest(BaseModel):
    """Schema for signup credentials."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    workspace_name: str = Field(..., min_length=1, alias="workspaceName")


class _Timestamped(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class UserRead(_Timestamped):
    """Schema for reading user info (response). Never includes the password hash."""

    id: int
    email: str


class WorkspaceRead(_Timestamped):
    """Schema for reading workspace info (response)."""

    id: int
    name: str


class SignupResponse(BaseModel):
    """Schema for a successful signup."""

    user: UserRead
    workspace: WorkspaceRead
    message: str = "Account created successfully"


class SessionUser(BaseModel):
    id: int
    email: str


class SessionWorkspace(BaseModel):
    id: int


class SessionResponse(BaseModel):
    """Schema for the current session."""

    authenticated: bool = True
    user: SessionUser
    workspace: SessionWorkspace


class ErrorResponse(BaseModel):
    """Standard error body."""

    error: str
    code: str
    details: dict[str, Any] | None = None
