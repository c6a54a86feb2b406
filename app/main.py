"""
FinSight FastAPI application entry point.

Signup: credentials → validation → user + workspace transaction → session cookie
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.api.errors import register_exception_handlers
from app.config import get_settings
from app.db.session import check_db_connection, engine
from app.services.session import SessionService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("FinSight starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        yield
    finally:
        logger.info("FinSight shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Raises ValueError when SESSION_SECRET is unset so a misconfigured process
    never serves requests.
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.session_service = SessionService(
        settings.session_secret,
        secure=settings.session_cookie_secure,
    )
    logger.info("Session service initialized (secure cookies: %s)", settings.session_cookie_secure)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)

    # Mount API routes
    from app.api.auth import router as auth_router

    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        try:
            check_db_connection()
        except SQLAlchemyError as e:
            logger.warning("Health check: database unreachable: %s", e)
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )
        return {"status": "ok", "version": __version__, "database": "connected"}

    return app


app = create_app()
