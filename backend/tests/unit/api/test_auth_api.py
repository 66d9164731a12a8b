"""
Unit Tests for Authentication API Endpoints
"""
import pytest
from httpx import AsyncClient
from faker import Faker
from sqlalchemy import select, func

from app.core.config import settings
from app.core.rate_limiter import limiter
from app.models import User
from conftest import API, TEST_PASSWORD

fake = Faker()


def registration_payload(**overrides):
    data = {
        'name': fake.name(),
        'email': fake.unique.email(),
        'password': 'securePassword123!',
    }
    data.update(overrides)
    return data


class TestUserRegistration:
    """Test user registration endpoint"""

    async def test_register_success(self, client: AsyncClient):
        """Registration creates a member and starts a session"""
        payload = registration_payload()

        response = await client.post(f'{API}/auth/register', json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data['message'] == '회원가입이 완료되었습니다.'
        assert data['user']['email'] == payload['email'].lower()
        assert data['user']['role'] == 'user'
        assert 'password' not in data['user']
        assert settings.SESSION_COOKIE_NAME in response.cookies

    async def test_register_then_me(self, client: AsyncClient, client_factory):
        payload = registration_payload()
        registered = await client.post(f'{API}/auth/register', json=payload)
        token = registered.cookies[settings.SESSION_COOKIE_NAME]

        session_client = client_factory({settings.SESSION_COOKIE_NAME: token})
        response = await session_client.get(f'{API}/auth/me')

        assert response.status_code == 200
        assert response.json()['name'] == payload['name']

    async def test_register_duplicate_email(self, client: AsyncClient, db_session, test_user):
        """Duplicate emails are refused and no row is added"""
        before = await db_session.scalar(select(func.count(User.id)))

        response = await client.post(
            f'{API}/auth/register',
            json=registration_payload(email=test_user.email.upper()),
        )

        assert response.status_code == 400
        assert response.json() == {'error': '이미 존재하는 이메일입니다.', 'code': 'DUPLICATE_EMAIL'}
        assert await db_session.scalar(select(func.count(User.id))) == before

    async def test_register_invalid_email(self, client: AsyncClient):
        response = await client.post(f'{API}/auth/register', json=registration_payload(email='not-an-email'))

        assert response.status_code == 400
        assert 'error' in response.json()

    async def test_register_short_password(self, client: AsyncClient):
        response = await client.post(f'{API}/auth/register', json=registration_payload(password='123'))

        assert response.status_code == 400

    async def test_register_missing_fields(self, client: AsyncClient):
        response = await client.post(f'{API}/auth/register', json={'email': fake.email()})

        assert response.status_code == 400


class TestUserLogin:
    """Test login endpoint"""

    async def test_login_success(self, client: AsyncClient, test_user):
        response = await client.post(
            f'{API}/auth/login',
            json={'email': test_user.email, 'password': TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data['user']['id'] == test_user.id
        assert settings.SESSION_COOKIE_NAME in response.cookies

    async def test_login_email_case_insensitive(self, client: AsyncClient, test_user):
        response = await client.post(
            f'{API}/auth/login',
            json={'email': test_user.email.upper(), 'password': TEST_PASSWORD},
        )

        assert response.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, test_user):
        response = await client.post(
            f'{API}/auth/login',
            json={'email': test_user.email, 'password': 'wrongpassword'},
        )

        assert response.status_code == 401
        assert response.json()['code'] == 'INVALID_CREDENTIALS'
        assert settings.SESSION_COOKIE_NAME not in response.cookies

    async def test_login_unknown_email_same_message(self, client: AsyncClient, test_user):
        """Unknown email and wrong password are indistinguishable"""
        unknown = await client.post(
            f'{API}/auth/login',
            json={'email': fake.unique.email(), 'password': TEST_PASSWORD},
        )
        wrong = await client.post(
            f'{API}/auth/login',
            json={'email': test_user.email, 'password': 'wrongpassword'},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    async def test_login_inactive_user(self, client: AsyncClient, db_session, test_user):
        test_user.is_active = False
        await db_session.commit()

        response = await client.post(
            f'{API}/auth/login',
            json={'email': test_user.email, 'password': TEST_PASSWORD},
        )

        assert response.status_code == 401


class TestSession:
    """Test /me and logout"""

    async def test_me_requires_session(self, client: AsyncClient):
        response = await client.get(f'{API}/auth/me')

        assert response.status_code == 401
        assert response.json()['code'] == 'AUTHENTICATION_REQUIRED'

    async def test_me_with_cookie(self, user_client: AsyncClient, test_user):
        response = await user_client.get(f'{API}/auth/me')

        assert response.status_code == 200
        assert response.json()['email'] == test_user.email

    async def test_me_with_bearer_header(self, client: AsyncClient, auth_cookies, test_user):
        token = auth_cookies[settings.SESSION_COOKIE_NAME]

        response = await client.get(f'{API}/auth/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 200
        assert response.json()['id'] == test_user.id

    async def test_me_for_deactivated_user(self, user_client: AsyncClient, db_session, test_user):
        """A valid token for a deactivated account is not a session"""
        test_user.is_active = False
        await db_session.commit()

        response = await user_client.get(f'{API}/auth/me')

        assert response.status_code == 401

    async def test_me_for_deleted_user(self, user_client: AsyncClient, db_session, test_user):
        await db_session.delete(test_user)
        await db_session.commit()

        response = await user_client.get(f'{API}/auth/me')

        assert response.status_code == 401

    async def test_logout_clears_cookie(self, user_client: AsyncClient):
        response = await user_client.post(f'{API}/auth/logout')

        assert response.status_code == 200
        assert response.json() == {'message': '로그아웃되었습니다.'}
        set_cookie = response.headers.get('set-cookie', '')
        assert set_cookie.startswith(f'{settings.SESSION_COOKIE_NAME}=')
        assert 'Max-Age=0' in set_cookie

    async def test_logout_without_session(self, client: AsyncClient):
        response = await client.post(f'{API}/auth/logout')

        assert response.status_code == 200


class TestLoginRateLimit:

    @pytest.fixture
    def enabled_limiter(self):
        limiter.reset()
        limiter.enabled = True
        yield limiter
        limiter.enabled = False
        limiter.reset()

    async def test_login_attempts_limited(self, client: AsyncClient, test_user, enabled_limiter):
        payload = {'email': test_user.email, 'password': 'wrongpassword'}

        statuses = [
            (await client.post(f'{API}/auth/login', json=payload)).status_code
            for _ in range(6)
        ]

        assert statuses[:5] == [401] * 5
        assert statuses[5] == 429
