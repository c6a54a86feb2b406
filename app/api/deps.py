"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends, Request

from app.db.session import get_db  # re-export
from app.exceptions import UnauthenticatedError
from app.services.session import SessionData, SessionService

__all__ = [
    "get_db",
    "get_session_service",
    "get_current_session",
    "require_session",
]


def get_session_service(request: Request) -> SessionService:
    """Return the SessionService built at startup (see app.main.create_app)."""
    return request.app.state.session_service


def get_current_session(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
) -> SessionData | None:
    """Return the session carried by the request cookie, or None."""
    return sessions.read(request)


def require_session(
    session: SessionData | None = Depends(get_current_session),
) -> SessionData:
    """Dependency that requires a valid session cookie.

    Missing, malformed, tampered and expired cookies all produce the same 401.
    """
    if session is None:
        raise UnauthenticatedError()
    return session
