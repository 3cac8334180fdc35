"""Error Handlers: global exception handlers for the Users API.

Invariants:
    - UsersApiError → its http_status with a plain-text public message
    - RequestValidationError → 400 "Bad Request"
    - Router HTTP errors (404 unknown path, 405 method) → plain text with the router's status
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details
    - Every response body is text/plain; there is no error envelope

Design Decisions:
    - Registered by the app factory so both router bindings share one error surface
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.errors import ErrorSeverity, UsersApiError

logger = logging.getLogger(__name__)

BAD_REQUEST = "Bad Request"
INTERNAL_ERROR = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_users_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        """Handle all Users API domain/infrastructure errors."""
        level = (
            logging.WARNING
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logging.ERROR
        )
        logger.log(
            level,
            f"UsersApiError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(exc.public_message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            BAD_REQUEST, status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
