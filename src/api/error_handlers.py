"""
Error handlers - Map domain exceptions and validation errors to HTTP responses.

Every error body carries a "detail" string, matching FastAPI's own
HTTPException format.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    ActivityError,
    ActivityNotFound,
    AlreadyJoined,
    InvalidCredentials,
    InvalidRole,
    InvalidToken,
    PermissionDenied,
)

logger = logging.getLogger(__name__)


def _describe(exc: ActivityError) -> tuple[int, str]:
    """Return (status_code, detail) for a domain exception."""
    if isinstance(exc, InvalidRole):
        return status.HTTP_400_BAD_REQUEST, 'Role must be "mahasiswa" or "admin"'
    if isinstance(exc, InvalidCredentials):
        return status.HTTP_400_BAD_REQUEST, "Invalid username or password"
    if isinstance(exc, InvalidToken):
        return status.HTTP_403_FORBIDDEN, "Invalid or expired token."
    if isinstance(exc, PermissionDenied):
        return (
            status.HTTP_403_FORBIDDEN,
            f"Access forbidden. This endpoint is for {exc.required_role} only.",
        )
    if isinstance(exc, ActivityNotFound):
        return status.HTTP_404_NOT_FOUND, "Activity not found"
    if isinstance(exc, AlreadyJoined):
        return status.HTTP_400_BAD_REQUEST, "You have already joined this activity"
    return status.HTTP_400_BAD_REQUEST, "Request could not be processed"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ActivityError)
    async def activity_error_handler(request: Request, exc: ActivityError) -> JSONResponse:
        status_code, detail = _describe(exc)
        logger.info(
            "%s on %s %s -> %d", type(exc).__name__, request.method, request.url.path, status_code
        )
        return JSONResponse(status_code=status_code, content={"detail": detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Missing or empty fields are a client error (400), not 422.
        # Raw input is left out of both log and body; it may hold a password.
        errors = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
            }
            for e in exc.errors()
        ]
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Incomplete data. Required fields are missing or empty.",
                "errors": errors,
            },
        )
