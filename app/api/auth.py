"""Authentication API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_session_service, require_session
from app.exceptions import SessionIssueError
from app.schemas.auth import (
    ErrorResponse,
    SessionResponse,
    SessionUser,
    SessionWorkspace,
    SignupRequest,
    SignupResponse,
    UserRead,
    WorkspaceRead,
)
from app.services.session import SessionData, SessionService
from app.services.signup import signup as run_signup

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def signup(
    body: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
) -> SignupResponse:
    """Create a user and workspace, then start a session.

    The account is committed before the cookie is issued. If issuing fails the
    client gets a 500 although the account exists.
    """
    result = run_signup(db, body.email, body.password, body.workspace_name)
    user, workspace = result.user, result.workspace

    try:
        sessions.issue(response, user.id, user.email, workspace.id)
    except SessionIssueError:
        logger.exception("Session issue failed for committed user id=%s", user.id)
        raise

    return SignupResponse(
        user=UserRead.model_validate(user),
        workspace=WorkspaceRead.model_validate(workspace),
    )


@router.get(
    "/session",
    response_model=SessionResponse,
    responses={401: {"model": ErrorResponse}},
)
def current_session(session: SessionData = Depends(require_session)) -> SessionResponse:
    """Return the identity carried by the session cookie."""
    return SessionResponse(
        user=SessionUser(id=session.user_id, email=session.email),
        workspace=SessionWorkspace(id=session.workspace_id),
    )


@router.post("/logout")
def logout(
    response: Response,
    sessions: SessionService = Depends(get_session_service),
) -> dict:
    """Clear the session cookie."""
    sessions.clear(response)
    return {"message": "Logged out"}
