"""
Session Resolution
==================
Turns the incoming request into an identity hint, or None.

The token is read from the session cookie first and from an
`Authorization: Bearer` header second. Nothing here touches the database;
the role carried in the token is only a hint and callers that need an
authoritative answer reload the user row (see dependencies.py).
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.core.logging_config import logger
from app.core.security import decode_token


@dataclass(frozen=True)
class SessionIdentity:
    """Identity claims recovered from a valid session token"""
    id: int
    email: Optional[str] = None
    role: Optional[str] = None


def extract_token(request: Request) -> Optional[str]:
    """Return the raw session token from cookie or Bearer header"""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token

    scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return None


def resolve_token(token: Optional[str]) -> Optional[SessionIdentity]:
    """Verify a token and map its claims to a SessionIdentity"""
    if not token:
        return None

    try:
        payload = decode_token(token)
    except AuthenticationError as e:
        logger.debug(f"Session token rejected: {e.code}")
        return None

    if payload.get("type") != "access":
        return None

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None

    return SessionIdentity(
        id=user_id,
        email=payload.get("email"),
        role=payload.get("role"),
    )


def resolve_session(request: Request) -> Optional[SessionIdentity]:
    """Resolve the request's session; never raises"""
    return resolve_token(extract_token(request))


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        domain=settings.SESSION_COOKIE_DOMAIN,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        domain=settings.SESSION_COOKIE_DOMAIN,
        path="/",
    )
