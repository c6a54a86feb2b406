"""SQLAlchemy models."""

from app.models.user import User
from app.models.user_workspace import UserWorkspace
from app.models.workspace import Workspace

__all__ = [
    "User",
    "UserWorkspace",
    "Workspace",
]
