"""User model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Index, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.db.session import Base

if TYPE_CHECKING:
    from app.models.workspace import Workspace


def utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """Account identity. Email is stored lower-cased and is unique."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    workspaces: Mapped[list[Workspace]] = relationship(
        "Workspace",
        secondary="user_workspaces",
        back_populates="users",
        viewonly=True,
    )

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        return value.lower() if value is not None else value

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


# Case-insensitive uniqueness for rows written outside the ORM
Index("uq_users_email_lower", func.lower(User.email), unique=True)
