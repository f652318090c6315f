"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_session_provider dependency overridden with a manager on the test engine
    - App exceptions are turned into responses, not re-raised into the test
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from postboard.db.base import Base
from postboard.infrastructure.database import (
    DatabaseSessionManager, get_session_provider,
)
from postboard.main import app
from postboard.services.post_repository import SqlPostRepository
import postboard.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repo(test_db):
    return SqlPostRepository(test_db)


@pytest.fixture
def provider(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def client(provider):
    """FastAPI test client with the session provider overridden."""
    app.dependency_overrides[get_session_provider] = lambda: provider

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_posts(repo):
    """Three active posts: ids 1, 2, 3 in creation order."""
    return [
        await repo.create("first"),
        await repo.create("second"),
        await repo.create("third"),
    ]
