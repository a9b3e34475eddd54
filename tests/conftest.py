"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting and table bootstrapping in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.database.models import UserProfileModel
from infrastructure.database.session import Database


# Test database URL (SQLite in memory, one per test)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create a fresh in-memory database with all tables."""
    db = Database(TEST_DATABASE_URL)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def count_profiles(database: Database):
    """Return a coroutine function that counts stored profiles."""

    async def _count() -> int:
        async with database.session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(UserProfileModel)
            )
            return result.scalar() or 0

    return _count


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client backed by the in-memory database.

    The ASGI transport does not run the lifespan, so the database dependency
    is overridden instead of being read from ``app.state``.
    """
    from api.dependencies.database import get_database
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_database] = lambda: database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
