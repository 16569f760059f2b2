"""Error Handlers — global exception handlers for the library API.

Invariants:
    - LibraryError → structured JSON with code, message, category, severity, timestamp, path
    - RequestValidationError → VALIDATION_FAILED (400) with field-level details
    - Exception (catch-all) → INTERNAL_ERROR (500), never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LibraryError), validation (Pydantic), catch-all (Exception)
    - Domain 4xx logged at WARNING, infrastructure 5xx at ERROR
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from library_api.core.errors import LibraryError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_library_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_library_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(LibraryError)
    async def library_error_handler(request: Request, exc: LibraryError):
        """Handle all library domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request.url.path),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_FAILED", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, request.url.path),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                    "timestamp": _now(),
                    "path": request.url.path,
                },
            },
        )


def _build_validation_error_response(
    exc: RequestValidationError, path: str,
) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_FAILED",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.WARNING.value,
            "timestamp": _now(),
            "path": path,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
