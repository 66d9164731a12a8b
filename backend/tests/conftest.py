"""
Community Hub - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Callable, Dict, Optional
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import NullPool
from faker import Faker

# Set testing environment
os.environ['TESTING'] = 'true'
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test.db'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['AUTO_APPROVE_GUESTBOOK'] = 'false'
os.environ['LOG_LEVEL'] = 'WARNING'

from app.main import app
from app.core.config import settings
from app.core.database import Base, get_db
from app.models import Board, User, UserRole
from app.core.security import get_password_hash, create_access_token

fake = Faker()

TEST_PASSWORD = 'testpassword123'
ADMIN_PASSWORD = 'adminpassword123'
API = f"/api/{settings.API_VERSION}"

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test.db'
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


def session_cookies(user: User) -> Dict[str, str]:
    token = create_access_token({'id': user.id, 'email': user.email, 'role': user.role})
    return {settings.SESSION_COOKIE_NAME: token}


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client_factory(db_session: AsyncSession) -> AsyncGenerator[Callable[..., AsyncClient], None]:
    """Build test clients sharing the test database, optionally carrying cookies"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    clients = []

    def factory(cookies: Optional[Dict[str, str]] = None) -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app), base_url='http://test', cookies=cookies)
        clients.append(ac)
        return ac

    yield factory

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory) -> AsyncClient:
    """Anonymous test client"""
    return client_factory()


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a regular member"""
    user = User(
        name=fake.name(),
        email=fake.unique.email().lower(),
        hashed_password=get_password_hash(TEST_PASSWORD),
        role=UserRole.USER.value,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """A second member, for ownership checks"""
    user = User(
        name=fake.name(),
        email=fake.unique.email().lower(),
        hashed_password=get_password_hash(TEST_PASSWORD),
        role=UserRole.USER.value,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """Create an admin"""
    user = User(
        name=fake.name(),
        email=fake.unique.email().lower(),
        hashed_password=get_password_hash(ADMIN_PASSWORD),
        role=UserRole.ADMIN.value,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def auth_cookies(test_user: User) -> Dict[str, str]:
    """Session cookie for the regular member"""
    return session_cookies(test_user)


@pytest.fixture
def admin_cookies(admin_user: User) -> Dict[str, str]:
    """Session cookie for the admin"""
    return session_cookies(admin_user)


@pytest.fixture
def user_client(client_factory, auth_cookies) -> AsyncClient:
    return client_factory(auth_cookies)


@pytest.fixture
def other_client(client_factory, other_user) -> AsyncClient:
    return client_factory(session_cookies(other_user))


@pytest.fixture
def admin_client(client_factory, admin_cookies) -> AsyncClient:
    return client_factory(admin_cookies)


@pytest.fixture
async def board(db_session: AsyncSession) -> Board:
    """Board that accepts guest posts"""
    board = Board(
        title='자유게시판',
        description=fake.sentence(),
        category='일반',
        allow_guest=True,
        is_active=True,
    )
    db_session.add(board)
    await db_session.commit()
    await db_session.refresh(board)
    return board


@pytest.fixture
async def members_board(db_session: AsyncSession) -> Board:
    """Board closed to guests"""
    board = Board(
        title='Notice',
        description=fake.sentence(),
        category='공지사항',
        allow_guest=False,
        is_active=True,
    )
    db_session.add(board)
    await db_session.commit()
    await db_session.refresh(board)
    return board


@pytest.fixture
def per_request_sessions(client_factory) -> Callable[..., AsyncClient]:
    """Clients whose requests each open their own database session"""
    async def fresh_session():
        async with TestSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = fresh_session
    return client_factory
