"""
Community Hub - HTTP Middleware

RequestLoggingMiddleware tags every request with an id, times it, and
writes one access line when it completes. SecurityHeadersMiddleware adds
the browser hardening headers and keeps API responses out of caches.
"""

import time
from typing import Callable, FrozenSet
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import settings
from app.core.logging_config import (
    logger,
    set_request_id,
    set_user_id,
    generate_request_id,
)


# Probe and docs traffic is not access-logged
QUIET_PATHS: FrozenSet[str] = frozenset({
    "/health",
    "/",
    "/favicon.ico",
    "/docs",
    "/redoc",
    "/openapi.json",
})

SLOW_REQUEST_MS = 1000


def should_skip_logging(path: str) -> bool:
    return path in QUIET_PATHS or path.startswith("/docs/")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access logging with request correlation.

    The incoming X-Request-ID is reused when the client sends one. The id
    and the elapsed time are echoed back as response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        set_request_id(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"✗ {request.method} {request.url.path} raised {type(exc).__name__} after {elapsed_ms:.2f}ms",
                exc_info=True,
                extra={
                    "event_type": "http_request_error",
                    "http_method": request.method,
                    "http_path": request.url.path,
                    "duration_ms": elapsed_ms,
                },
            )
            raise
        finally:
            set_user_id("")

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        path = request.url.path
        if not should_skip_logging(path):
            # Set by the session dependency once the user is resolved
            user_id = getattr(request.state, "user_id", None)
            logger.log_request(
                request.method,
                path,
                response.status_code,
                elapsed_ms,
                client_ip=request.client.host if request.client else None,
                session_user_id=user_id,
            )
            if elapsed_ms > SLOW_REQUEST_MS:
                logger.warning(
                    f"Slow request: {request.method} {path} took {elapsed_ms:.2f}ms",
                    extra={"event_type": "slow_request", "duration_ms": elapsed_ms},
                )

        set_request_id("")
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Hardening headers; API responses carry user data and are never cached"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        if request.url.path.startswith(settings.api_prefix):
            response.headers.setdefault("Cache-Control", "no-store")

        return response


__all__ = [
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "should_skip_logging",
    "QUIET_PATHS",
]
