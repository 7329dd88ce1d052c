"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "message": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [{"field": "title", "message": "Title is required"}],
        "details": {}
    }

`errors` and `details` are only present when they carry something.

Exception Handling:
===================
1. SnipshareException subclasses → Their status_code and to_dict()
2. RequestValidationError (bad body/query/path) → 400 with one entry per field
3. SQLAlchemyError → 503 STORE_UNAVAILABLE, retryable for GET requests only
4. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from snipshare.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from snipshare.shared.core.exceptions import (
    SnipshareException,
    StoreUnavailableError,
    ValidationError,
)
from snipshare.shared.core.logging import logger


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "title") → "title", ("query", "limit") → "limit"
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def _field_message(error: dict[str, Any]) -> str:
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", "Invalid value"))


def validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors to [{field, message}]."""
    return [
        {"field": _field_name(tuple(error.get("loc", ()))), "message": _field_message(error)}
        for error in exc.errors()
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SnipshareException)
    async def snipshare_exception_handler(
        request: Request,
        exc: SnipshareException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from SnipshareException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - errors/details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body, query or path doesn't match the schema.
        Nothing has been written at this point.
        """
        error = ValidationError(errors=validation_errors(exc))
        logger.warning(
            "Validation error",
            errors=error.errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict(),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle database failures.

        Reads can be retried safely; a failed mutation may or may not have
        been applied, so it is reported as not retryable.
        """
        error = StoreUnavailableError(retryable=request.method == "GET")
        logger.error(
            "Database error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            method=request.method,
            exc_info=True,
        )
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )
