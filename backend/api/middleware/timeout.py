"""
Request timeout middleware.

Bounds the time any single request may spend in the application.
"""

import asyncio
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..models.errors import ErrorResponse

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """Answer 504 when a request runs longer than `timeout` seconds."""

    def __init__(self, app, timeout: float):
        super().__init__(app)
        self.timeout = timeout

    async def dispatch(self, request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "%s %s exceeded %.1fs and was cut off",
                request.method,
                request.url.path,
                self.timeout,
            )
            body = ErrorResponse(
                error="Gateway Timeout",
                detail="Request took too long",
                code="REQUEST_TIMEOUT",
            )
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content=body.model_dump(),
            )
