"""
Application-wide exception handlers.

Domain errors are translated to HTTPException in the routes. What reaches
these handlers is malformed input and infrastructure failure; the latter
is logged in full and answered with a generic body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import StoreError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
        return _error(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(
                error="Bad Request",
                detail="Request body is malformed",
                code="INVALID_BODY",
            ),
        )

    @app.exception_handler(StoreError)
    async def store_exception_handler(request: Request, exc: StoreError):
        logger.error(
            "Store failure during %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                error="Internal Server Error",
                detail="An internal error occurred",
                code="INTERNAL_ERROR",
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error during %s %s", request.method, request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                error="Internal Server Error",
                detail="An internal error occurred",
                code="INTERNAL_ERROR",
            ),
        )
