"""
AI Notes Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Settings are pointed at an in-memory SQLite database before any
       `ainotes` import; each test then gets a fresh schema on its own
       engine, wired into the app through dependency_overrides.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       in-memory aiosqlite engine with all tables created
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── db_session:      a session on db_engine for direct inspection
    ├── test_client:     HTTPX AsyncClient routed straight into the app
    ├── auth_headers:    factory producing a Bearer header for any user id
    └── call_action:     POST helper for the RPC endpoints
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ainotes.auth import create_access_token
from ainotes.database import Base, get_db_session
from ainotes.main import app
import ainotes.models  # noqa: F401  (registers every table on Base.metadata)


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        mock_db_session.execute.return_value = result_with_row
        await job_service.update_job(mock_db_session, "user-a", data)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    A private in-memory database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX client talking to the app in-process, backed by the test database.

    The override mirrors get_db_session: commit on success, roll back on
    any error.
    """

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    """
    Usage:
        await test_client.post(url, json=body, headers=auth_headers("user-a"))
    """

    def _headers(user_id: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest_asyncio.fixture
async def call_action(test_client, auth_headers):
    """
    POST to /api/actions/<name> as `user` (None sends no Authorization).

    Usage:
        response = await call_action("createDocument", {"title": "t", "content": "c"})
    """

    async def _call(name: str, body=None, user: str = "user-a"):
        headers = auth_headers(user) if user else {}
        return await test_client.post(
            f"/api/actions/{name}",
            json={} if body is None else body,
            headers=headers,
        )

    return _call
