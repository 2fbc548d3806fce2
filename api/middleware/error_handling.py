"""
api.middleware.error_handling - Global error handling for API.

Every failure leaves the service as a JSON body of the form
{"success": false, "error": "<message>"}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, **extra: str) -> JSONResponse:
    """Build the failure envelope shared by routes and handlers."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions (404, 405...) with consistent format."""
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """
        Handle validation errors with a readable summary.

        Current routes take plain string path ids, so this only fires for
        routes that declare typed parameters or bodies.
        """
        parts = [
            f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return error_response(422, "; ".join(parts) or "Validation error")

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions; the message is passed through as-is."""
        logger.exception(f"Unexpected error on {request.url.path}: {exc}")
        return error_response(500, str(exc))
