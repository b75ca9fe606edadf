"""
Centralized error handlers for FastAPI.

Maps notification domain errors to HTTP responses.
No stack traces or provider internals are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.notifications.errors import (
    DispatchFailureError,
    InvalidArgumentError,
    NotificationDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500
HTTP_502 = 502


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle missing or malformed input."""
        logger.warning("Invalid %s: %s", exc.field, exc.message)
        return _error_response(HTTP_400, "Invalid argument", exc.message)

    @app.exception_handler(DispatchFailureError)
    async def handle_dispatch_failure(
        _request: Request, exc: DispatchFailureError
    ) -> JSONResponse:
        """Handle provider failures without leaking provider details."""
        code = exc.details.code if exc.details else None
        logger.error("Dispatch failure during %s (code=%s)", exc.operation, code)
        return _error_response(HTTP_502, "Notification dispatch failed")

    @app.exception_handler(NotificationDomainError)
    async def handle_notification_domain(
        _request: Request, exc: NotificationDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled notification domain errors."""
        logger.error("Unhandled notification domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
