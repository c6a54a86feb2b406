"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "FinSight"
    debug: bool = False
    environment: str = "development"  # "production" turns on Secure cookies

    # Database (postgresql+psycopg for psycopg3; sqlite:// accepted for tests/local dev)
    database_url: str = "postgresql+psycopg://localhost:5432/finsight_dev"
    db_connect_timeout: int = 10  # seconds

    # Session
    session_secret: str = ""
    session_cookie_secure: bool = False

    # CORS
    cors_allowed_origins: list[str] = []

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("APP_ENV", self.environment).lower()

        default_url = (
            f"postgresql+psycopg://{os.getenv('DB_USER', 'postgres')}:"
            f"{os.getenv('DB_PASSWORD', '')}@"
            f"{os.getenv('DB_HOST', 'localhost')}:"
            f"{os.getenv('DB_PORT', '5432')}/"
            f"{os.getenv('DB_NAME', 'finsight_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgres://"):
            raw_url = raw_url.replace("postgres://", "postgresql://", 1)
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.session_secret = os.getenv("SESSION_SECRET", "")
        secure_default = "true" if self.is_production else "false"
        self.session_cookie_secure = (
            os.getenv("SESSION_COOKIE_SECURE", secure_default).lower() == "true"
        )

        # Comma-separated origins; the Vite dev server is allowed by default
        _origins = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173").strip()
        self.cors_allowed_origins = [o.strip() for o in _origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
