"""Error Handlers — global exception handlers for the Postboard API.

Invariants:
    - PostboardError → its http_status, empty body
    - HTTPException (routing level, e.g. 405) → its status, empty body
    - Exception (catch-all) → 500, empty body, full traceback logged
    - Store error detail is logged, never returned

Design Decisions:
    - Three-layer handler: domain (PostboardError), framework (HTTPException), catch-all
    - Extracted from main.py to keep the entry point import fan-out small
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.api.responses import empty_response
from postboard.core.errors import PostboardError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_postboard_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_postboard_error_handler(app: FastAPI) -> None:
    """Register Postboard domain/infrastructure error handler."""

    @app.exception_handler(PostboardError)
    async def postboard_error_handler(request: Request, exc: PostboardError):
        """Handle all Postboard domain/infrastructure errors."""
        level = (
            logging.ERROR
            if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            else logging.WARNING
        )
        logger.log(
            level,
            f"PostboardError: {exc.message}",
            extra={
                **exc.to_log_extra(),
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return empty_response(exc.http_status)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return empty_response(exc.status_code)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return empty_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
