"""
Request logging middleware for FastAPI application.

This module follows SRP by handling only request/response logging.
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.shared.logger import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    HTTP middleware for request/response logging.

    Logs method, path, status and timing of each request.
    The correlation ID is taken from the request header or generated, exposed
    to log records through correlation_id_var and echoed in the response.
    """

    # Paths to exclude from detailed logging (high-frequency, low-value)
    EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/docs",
        "/openapi.json",
        "/favicon.ico",
    )

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    def _should_log(self, path: str) -> bool:
        """Check if request should be logged based on path."""
        return not any(path.startswith(exclude) for exclude in self.EXCLUDE_PATHS)

    def _generate_correlation_id(self) -> str:
        """Generate a unique correlation ID for request tracing."""
        return uuid.uuid4().hex[:8]

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        """
        Process request with logging.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler
        """
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or self._generate_correlation_id()
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)

        try:
            if not self._should_log(request.url.path):
                response = await call_next(request)
                response.headers[CORRELATION_ID_HEADER] = correlation_id
                return response

            start_time = time.perf_counter()
            logger.info(f"--> {request.method} {request.url.path} from {self._get_client_ip(request)}")

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(f"<-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}")
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000

            log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                log_level,
                f"<-- {request.method} {request.url.path} {response.status_code} in {duration_ms:.2f}ms",
            )

            response.headers[CORRELATION_ID_HEADER] = correlation_id
            response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"
            return response
        finally:
            correlation_id_var.reset(token)

    def _get_client_ip(self, request: Request) -> str:
        """
        Extract client IP from request, considering proxies.

        Checks X-Forwarded-For header for proxied requests.
        """
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take first IP in chain (original client)
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"
