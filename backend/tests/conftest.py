"""Root conftest - async DB + FastAPI test client shared by all layers.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app under test receives its session manager explicitly (no globals patched)
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from incalink.config import Settings  # noqa: E402
from incalink.db.base import Base  # noqa: E402
from incalink.infrastructure.database import DatabaseSessionManager  # noqa: E402
from incalink.main import create_app  # noqa: E402
import incalink.models  # noqa: E402,F401


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
def db_manager(test_engine):
    return DatabaseSessionManager(engine=test_engine)


@pytest.fixture
def app(db_manager):
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    )
    return create_app(settings, db_manager=db_manager)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the in-memory database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
