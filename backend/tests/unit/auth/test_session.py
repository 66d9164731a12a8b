"""
Unit Tests for session resolution
Tests for: cookie/Bearer extraction, token verification, identity mapping
"""
from datetime import datetime, timedelta
from typing import Dict, Optional
from jose import jwt
from starlette.requests import Request

from app.core.config import settings
from app.core.security import create_access_token
from app.modules.auth.session import SessionIdentity, resolve_session, resolve_token


def make_request(cookies: Optional[Dict[str, str]] = None, headers: Optional[Dict[str, str]] = None) -> Request:
    raw_headers = []
    if cookies:
        cookie_header = "; ".join(f"{key}={value}" for key, value in cookies.items())
        raw_headers.append((b"cookie", cookie_header.encode()))
    for key, value in (headers or {}).items():
        raw_headers.append((key.lower().encode(), value.encode()))
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": raw_headers,
        "query_string": b"",
    })


def valid_token(user_id: int = 5, role: str = "user") -> str:
    return create_access_token({"id": user_id, "email": "member@example.com", "role": role})


class TestResolveSession:
    """Test resolve_session"""

    def test_cookie_session(self):
        request = make_request(cookies={settings.SESSION_COOKIE_NAME: valid_token(5)})

        identity = resolve_session(request)

        assert identity == SessionIdentity(id=5, email="member@example.com", role="user")

    def test_bearer_header_session(self):
        request = make_request(headers={"Authorization": f"Bearer {valid_token(9, 'admin')}"})

        identity = resolve_session(request)

        assert identity is not None
        assert identity.id == 9
        assert identity.role == "admin"

    def test_cookie_wins_over_header(self):
        request = make_request(
            cookies={settings.SESSION_COOKIE_NAME: valid_token(1)},
            headers={"Authorization": f"Bearer {valid_token(2)}"},
        )

        assert resolve_session(request).id == 1

    def test_no_token(self):
        assert resolve_session(make_request()) is None

    def test_non_bearer_scheme_ignored(self):
        request = make_request(headers={"Authorization": f"Basic {valid_token()}"})

        assert resolve_session(request) is None

    def test_garbage_cookie(self):
        request = make_request(cookies={settings.SESSION_COOKIE_NAME: "not.a.jwt"})

        assert resolve_session(request) is None


class TestResolveToken:
    """Rejected tokens resolve to None instead of raising"""

    def test_expired_token(self):
        token = create_access_token({"id": 1}, expires_delta=timedelta(seconds=-5))

        assert resolve_token(token) is None

    def test_tampered_token(self):
        token = valid_token()
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[:-4]}AAAA"

        assert resolve_token(tampered) is None

    def test_wrong_secret(self):
        token = jwt.encode(
            {"sub": "1", "type": "access", "exp": datetime.utcnow() + timedelta(hours=1)},
            "not-the-server-secret",
            algorithm=settings.JWT_ALGORITHM,
        )

        assert resolve_token(token) is None

    def test_wrong_token_type(self):
        token = jwt.encode(
            {"sub": "1", "type": "refresh", "exp": datetime.utcnow() + timedelta(hours=1)},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        assert resolve_token(token) is None

    def test_non_integer_subject(self):
        token = jwt.encode(
            {"sub": "abc", "type": "access", "exp": datetime.utcnow() + timedelta(hours=1)},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        assert resolve_token(token) is None

    def test_empty_token(self):
        assert resolve_token("") is None
        assert resolve_token(None) is None
