"""Error Handlers — global exception handlers for the Intern Tracker API.

Invariants:
    - InternTrackerError → its http_status with {success: false, error, code, details?}
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500; message sanitized in production, shown in development

Design Decisions:
    - Three-layer handler: domain (InternTrackerError), validation (Pydantic), catch-all (Exception)
    - 4xx domain errors log at WARNING, 5xx at ERROR: client mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from intern_tracker.config import get_settings
from intern_tracker.core.errors import InternTrackerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Intern Tracker domain/infrastructure error handler."""

    @app.exception_handler(InternTrackerError)
    async def intern_tracker_error_handler(request: Request, exc: InternTrackerError):
        """Handle all Intern Tracker domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "intern_id": exc.context.intern_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=build_domain_error_response(exc),
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
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details in production."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_internal_error_response(exc),
        )


def build_domain_error_response(exc: InternTrackerError) -> dict:
    """Envelope for a domain error; 5xx messages sanitized in production."""
    body = exc.to_response()
    if exc.http_status >= 500 and get_settings().is_production:
        body["error"] = "Something went wrong"
    return body


def build_internal_error_response(exc: Exception) -> dict:
    return {
        "success": False,
        "error": "Internal Server Error",
        "code": "INTERNAL_ERROR",
        "message": "Something went wrong" if get_settings().is_production else str(exc),
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "success": False,
        "error": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "details": [
            {
                "field": _field_path(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }


def _field_path(loc: tuple) -> str:
    """Dotted field path without the body/query/path source prefix."""
    if loc and loc[0] in ("body", "query", "path"):
        loc = loc[1:]
    return ".".join(str(part) for part in loc) or "body"
