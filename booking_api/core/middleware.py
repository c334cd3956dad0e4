"""
Middleware configuration for the application.
Correlation ID, request logging and CORS.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from booking_api.config import get_settings

logger = structlog.get_logger(__name__)

QUIET_PATHS = ("/api/health",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        if request.url.path not in QUIET_PATHS:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                client_ip=request.client.host if request.client else "unknown",
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
        return response


def setup_middleware(app) -> None:
    """Setup all middleware for the application.

    Starlette runs middleware last-added-first, so CORS wraps everything and the
    correlation id is set before the request is logged.
    """
    settings = get_settings()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
