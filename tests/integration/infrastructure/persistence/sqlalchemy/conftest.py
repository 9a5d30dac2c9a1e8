"""Pytest fixtures for SQLAlchemy integration tests."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from snapix.infrastructure.persistence.sqlalchemy import Base


@pytest.fixture
async def engine():
    """Create async SQLite engine for testing.

    One shared in-memory connection, so every session sees the same tables.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def session(session_factory):
    """Session rolled back after each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()
