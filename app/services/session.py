"""Cookie sessions: signed JWT carrying user id, email and workspace id.

One SessionService is built at startup and passed to request handlers; there is
no module-level signing key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request, Response
from jose import JWTError, jwt

from app.exceptions import SessionIssueError

logger = logging.getLogger(__name__)

# JWT configuration
ALGORITHM = "HS256"
SESSION_COOKIE = "finsight_session"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days


@dataclass(frozen=True)
class SessionData:
    """Identity asserted by a session cookie."""

    user_id: int
    email: str
    workspace_id: int


class SessionService:
    """Issues and reads the session cookie."""

    def __init__(
        self,
        secret_key: str,
        secure: bool = False,
        max_age: int = SESSION_MAX_AGE,
        cookie_name: str = SESSION_COOKIE,
    ) -> None:
        if not secret_key:
            raise ValueError("SESSION_SECRET environment variable is required")
        self._secret_key = secret_key
        self.secure = secure
        self.max_age = max_age
        self.cookie_name = cookie_name

    def create_token(self, user_id: int, email: str, workspace_id: int) -> str:
        """Create a signed token for the given identity."""
        now = datetime.now(timezone.utc)
        claims = {
            "user_id": user_id,
            "email": email,
            "workspace_id": workspace_id,
            "iat": now,
            "exp": now + timedelta(seconds=self.max_age),
        }
        try:
            return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)
        except (JWTError, TypeError, ValueError) as exc:
            raise SessionIssueError() from exc

    def decode_token(self, token: str) -> Optional[SessionData]:
        """Decode and validate a token. Returns None if it is invalid in any way."""
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None

        user_id = payload.get("user_id")
        email = payload.get("email")
        workspace_id = payload.get("workspace_id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return None
        if not isinstance(workspace_id, int) or isinstance(workspace_id, bool):
            return None
        if not isinstance(email, str):
            return None
        return SessionData(user_id=user_id, email=email, workspace_id=workspace_id)

    def issue(self, response: Response, user_id: int, email: str, workspace_id: int) -> None:
        """Set the session cookie on response."""
        token = self.create_token(user_id, email, workspace_id)
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="lax",
        )

    def read(self, request: Request) -> Optional[SessionData]:
        """Return the session on request, or None when absent or invalid."""
        token = request.cookies.get(self.cookie_name)
        if not token:
            return None
        session = self.decode_token(token)
        if session is None:
            logger.debug("Rejected invalid session cookie")
        return session

    def clear(self, response: Response) -> None:
        """Delete the session cookie (client-side logout)."""
        response.delete_cookie(
            key=self.cookie_name,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="lax",
        )
