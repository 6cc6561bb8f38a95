"""
Middleware configuration for the application.
Correlation IDs, request logging and the cross-origin policy.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from eventplanner.config import Settings
from eventplanner.core.exceptions import error_response

logger = structlog.get_logger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "Content-Type", "Authorization"]
CORS_MAX_AGE = 12 * 60 * 60


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its outcome and duration.

    Unexpected errors are logged once and answered here with a 500, so the
    response still passes through the CORS middleware.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                status_code=500,
                process_time_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return error_response(500, "Server error")

        claims = getattr(request.state, "claims", None) or {}
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            user_id=claims.get("user_id"),
            client_ip=request.client.host if request.client else "unknown",
            process_time_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup all middleware. Starlette runs the last one added first."""
    app.add_middleware(RequestLoggingMiddleware)

    # Outside the logger so every log line of the request carries the id
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )

    # Outermost, so preflight requests are answered before anything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=["Content-Length"],
        max_age=CORS_MAX_AGE,
    )
