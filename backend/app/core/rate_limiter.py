"""
Rate Limiting for Community Hub API
===================================
Implements rate limiting using slowapi.

Only the credential endpoints are limited (brute force protection):
- /auth/login: RATE_LIMIT_LOGIN (5/minute by default)
- /auth/register: RATE_LIMIT_REGISTER (3/minute by default)

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at a
shared backend when running several workers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging_config import logger


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key.

    Priority:
    1. Authenticated user ID (set on request.state by the auth dependency)
    2. IP address (for anonymous users)
    """
    user_id = getattr(request.state, 'user_id', None)
    if user_id:
        return f"user:{user_id}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
    strategy="fixed-window",
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with the usual error body and a Retry-After hint"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_user_identifier(request)}: {exc.detail}",
        extra={"event_type": "rate_limit", "http_path": request.url.path},
    )

    return JSONResponse(
        status_code=429,
        content={
            "error": "요청이 너무 많습니다. 잠시 후 다시 시도해주세요.",
            "code": "RATE_LIMIT_EXCEEDED",
        },
        headers={"Retry-After": "60"},
    )


def login_rate_limit():
    """Rate limit for login attempts"""
    return limiter.limit(settings.RATE_LIMIT_LOGIN)


def register_rate_limit():
    """Rate limit for account creation"""
    return limiter.limit(settings.RATE_LIMIT_REGISTER)
