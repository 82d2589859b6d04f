"""Service test fixtures — async DB, real dispatcher, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_dispatcher overridden with a dispatcher wired to the test DB
    - Lifespan never runs under ASGITransport; nothing here depends on it

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so tables created by the
      engine fixture are visible to every session the repositories open
    - The async_sessionmaker itself is the session provider (its instances are async
      context managers), matching DatabaseSessionManager.session in production
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from petstore.api.dependencies import get_dispatcher
from petstore.config import get_settings
from petstore.db.base import Base
from petstore.main import app, build_app_dispatcher


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
def dispatcher(test_session_factory):
    return build_app_dispatcher(test_session_factory)


@pytest.fixture
def use_dispatcher():
    """Install any dispatcher (real or spy) behind get_dispatcher."""
    def install(d):
        app.dependency_overrides[get_dispatcher] = lambda: d
    yield install
    app.dependency_overrides.clear()


@pytest.fixture
async def client(dispatcher, use_dispatcher):
    """FastAPI test client backed by the real dispatch table and test DB."""
    use_dispatcher(dispatcher)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def settings_env(monkeypatch):
    """Set environment variables and rebuild cached settings for one test."""
    def apply(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
    yield apply
    monkeypatch.undo()
    get_settings.cache_clear()
