"""API test fixtures: in-memory SQLite + FastAPI test clients for both bindings.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the users table
    - The app's DatabaseSessionManager is injected through app.state
      (httpx ASGITransport does not run the lifespan)
    - client uses the full binding, compact_client the compact binding;
      both share the same engine within a test

Design Decisions:
    - StaticPool: one shared connection so every session sees the same :memory: database
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import users_api.models  # noqa: F401
from users_api.config import Settings
from users_api.db.base import Base
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.main import create_app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


def build_app(db_manager, api_router="full"):
    app = create_app(Settings(api_router=api_router))
    app.state.db_manager = db_manager
    return app


@pytest.fixture
async def client(db_manager):
    """Test client for the full (FastAPI) binding."""
    app = build_app(db_manager, "full")
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def compact_client(db_manager):
    """Test client for the compact (Starlette) binding."""
    app = build_app(db_manager, "compact")
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def drop_users_table(test_engine):
    """Make every query fail by removing the table out from under the app."""
    async def _drop():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    return _drop
