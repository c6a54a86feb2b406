"""Exception handlers rendering the {error, code, details} envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import FinSightError

logger = logging.getLogger(__name__)


async def finsight_exception_handler(request: Request, exc: FinSightError) -> JSONResponse:
    """Convert a domain exception to its JSON body. 5xx causes are logged, not returned."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or missing body fields → 400 VALIDATION_ERROR."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request body",
            "code": "VALIDATION_ERROR",
            "details": {"message": "; ".join(messages)},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FinSightError, finsight_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
