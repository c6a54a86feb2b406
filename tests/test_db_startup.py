"""
Database startup, fail-fast and health tests.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app import __version__


def test_app_fails_to_start_when_db_unreachable() -> None:
    """App fails fast when database is unreachable at startup."""
    with patch("app.main.check_db_connection") as mock_check:
        mock_check.side_effect = Exception("Database unreachable")

        from app.main import create_app

        app = create_app()

        with pytest.raises(Exception, match="Database unreachable"):
            with TestClient(app) as test_client:
                test_client.get("/health")


def test_health_ok() -> None:
    from app.main import create_app

    with TestClient(create_app()) as test_client:
        resp = test_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": __version__, "database": "connected"}


def test_health_reports_unreachable_db() -> None:
    from app.main import create_app

    client = TestClient(create_app())
    with patch("app.main.check_db_connection") as mock_check:
        mock_check.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        resp = client.get("/health")
    assert resp.status_code == 503
    assert resp.json()["database"] == "disconnected"
