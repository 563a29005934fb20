"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Bookmark with id '603' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. CineFeelException subclasses → Their status_code, error_code, message and details
2. Request validation (FastAPI) and Pydantic ValidationError → 400 with details
3. Other exceptions → 500 with a generic message plus the error string

Usage:
======
    from cinefeel.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from cinefeel.shared.core.exceptions import CineFeelException
from cinefeel.shared.core.logging import logger
from cinefeel.shared.schemas.common import ErrorDetail, ErrorResponse


def _error_response(status_code: int, code: str, message: str, details: Optional[dict[str, Any]]) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _validation_response(errors: list) -> JSONResponse:
    return _error_response(
        400,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"errors": jsonable_encoder(errors)},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(CineFeelException)
    async def cinefeel_exception_handler(
        request: Request,
        exc: CineFeelException,
    ) -> JSONResponse:
        """
        Handle CineFeel-specific exceptions.

        All custom exceptions inherit from CineFeelException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle malformed requests (missing fields, bad path ids, wrong types).

        FastAPI answers these with 422 by default; the API uses 400.
        """
        logger.warning(
            "Request validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised outside request parsing.
        """
        logger.warning(
            "Validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        The full traceback is logged; the client gets a generic message and
        the error's string form.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return _error_response(
            500,
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            {"error": str(exc)},
        )
