# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the application settings are imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from asgi_lifespan import LifespanManager  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from blogdash.db import Database  # noqa: E402
from blogdash.main import app  # noqa: E402
from blogdash.managers import limiter, metrics_manager  # noqa: E402


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite+aiosqlite://")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Session on the in-memory database, rolled back after the test."""
    async with database.session_maker() as db_session:
        yield db_session
        await db_session.rollback()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client running the application lifespan."""
    limiter.enabled = False
    metrics_manager.reset_metrics()
    async with (
        LifespanManager(app) as manager,
        AsyncClient(base_url="http://test", transport=ASGITransport(app=manager.app)) as ac,
    ):
        yield ac
