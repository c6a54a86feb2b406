"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.test_constants import TEST_SESSION_SECRET

# Force an in-memory SQLite database; don't inherit from .env
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SESSION_SECRET"] = TEST_SESSION_SECRET
os.environ["APP_ENV"] = "test"
os.environ.pop("SESSION_COOKIE_SECURE", None)


@pytest.fixture
def db() -> Session:
    """Database session on a fresh schema. Tables are dropped after each test."""
    import app.models  # noqa: F401
    from app.db.session import Base, SessionLocal, engine

    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """TestClient on a fresh app with get_db overridden to use the test db session."""
    from app.db.session import get_db
    from app.main import create_app

    app = create_app()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app, raise_server_exceptions=False)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def session_service():
    """SessionService signed with the test secret."""
    from app.services.session import SessionService

    return SessionService(TEST_SESSION_SECRET)
