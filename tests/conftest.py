"""
Exercise Tracker - Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the test suite.
How:   Service tests use a mocked AsyncSession; endpoint tests build a fresh
       app per test against a throwaway SQLite file and drive it through
       httpx's ASGITransport.

Fixture Hierarchy:
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── test_settings:   Settings pointing at tmp_path/test.db
    ├── test_client:     AsyncClient for an app with permissive input
    └── strict_client:   AsyncClient for an app with STRICT_INPUT enabled
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any exercise_tracker import so the default Settings never
# point at a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from exercise_tracker.config import Settings  # noqa: E402
from exercise_tracker.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = user
        result = await exercise_service.get_log(mock_db_session, user_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="WARNING",
    )


async def _client_for(settings: Settings):
    app = create_app(settings)
    # ASGITransport does not send lifespan events; run startup/shutdown here
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest_asyncio.fixture
async def test_client(test_settings):
    """
    HTTP client for an app backed by an empty SQLite store.

    Usage:
        async def test_list_users(test_client):
            response = await test_client.get("/api/users")
            assert response.status_code == 200
    """
    async for client in _client_for(test_settings):
        yield client


@pytest_asyncio.fixture
async def strict_client(test_settings):
    strict_settings = test_settings.model_copy(update={"strict_input": True})
    async for client in _client_for(strict_settings):
        yield client
