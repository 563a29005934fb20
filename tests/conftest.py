"""
Shared test fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite). The API
client overrides get_db with a session factory bound to that database, so
each request still commits or rolls back as one transaction.
"""
import os

# Settings are read at import time by the engine module, so the environment
# must be in place before anything from cinefeel is imported.
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_ENV"] = "testing"
os.environ["TMDB_API_KEY"] = ""
os.environ["BCRYPT_ROUNDS"] = "4"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from cinefeel.api.dependencies.database import get_db  # noqa: E402
from cinefeel.api.main import app  # noqa: E402
from cinefeel.config.settings import get_settings  # noqa: E402
from cinefeel.shared.models import Base  # noqa: E402

TEST_PASSWORD = "correct horse battery staple"


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database shared by every connection of the test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """API client over the test database (no lifespan, no real Postgres)."""

    async def override_get_db() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    # Unhandled errors still produce the 500 JSON body instead of raising here
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return get_settings()


async def register_user(
    client: AsyncClient,
    email: str,
    nickname: str = "moviebuff",
    password: str = TEST_PASSWORD,
) -> tuple[int, str]:
    """
    Register a user through the API and return (user_id, session_token).

    The client's cookie jar is cleared afterwards so each request states
    which user it acts as through auth_headers().
    """
    response = await client.post(
        "/auth/register",
        json={"email": email, "password": password, "nickname": nickname},
    )
    assert response.status_code == 201, response.text
    token = session_token_from(response.headers["set-cookie"])
    assert token
    client.cookies.clear()
    return response.json()["user"]["id"], token


def auth_headers(token: str) -> dict[str, str]:
    return {"Cookie": f"token={token}"}


def cookie_attributes(set_cookie: str) -> set[str]:
    """Lower-cased attribute names/pairs of a Set-Cookie header, minus the value."""
    return {part.strip().lower() for part in set_cookie.split(";")[1:]}


def session_token_from(set_cookie: str) -> str:
    """The cookie value of a ``token=...; HttpOnly; ...`` Set-Cookie header."""
    name, _, value = set_cookie.split(";")[0].partition("=")
    assert name == "token"
    return value
