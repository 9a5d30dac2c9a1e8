"""Engine and session factory construction."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from snapix.config.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine from settings.

    Pool sizing is skipped for SQLite, whose aiosqlite pool does not take it.
    """
    if settings.is_sqlite:
        return create_async_engine(settings.database_url, echo=settings.db_echo)

    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # entities are read after commit
    )
