"""SQLAlchemy Unit of Work implementation."""

from types import TracebackType
from typing import Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from snapix.application.shared import UnitOfWork
from snapix.config.logging import get_logger
from snapix.domain.files.repositories import FileRepository
from snapix.domain.posts.repositories import PostRepository
from snapix.domain.shared import UpstreamError
from snapix.domain.users.repositories import UserRepository

from .repositories import (
    SQLAlchemyFileRepository,
    SQLAlchemyPostRepository,
    SQLAlchemyUserRepository,
)

logger = get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of the Unit of Work pattern.

    Responsibilities:
    - Owns one AsyncSession per ``async with`` block
    - Commit/rollback; automatic rollback on exceptions
    - Lazy repositories sharing that session

    Example:
        >>> session_factory = async_sessionmaker(engine, expire_on_commit=False)
        >>> async with SQLAlchemyUnitOfWork(session_factory) as uow:
        ...     post = await uow.posts.get_by_id(1)
        ...     post.edit("new text")
        ...     await uow.posts.save(post)
        ...     await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Repository instances (lazy initialized)
        self._users: Optional[UserRepository] = None
        self._posts: Optional[PostRepository] = None
        self._files: Optional[FileRepository] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
                logger.debug("unit_of_work.rolled_back", exception_type=exc_type.__name__)
        finally:
            # Always close session (cleanup)
            if self._session is not None:
                await self._session.close()
                self._session = None
                self._users = None
                self._posts = None
                self._files = None

    async def commit(self) -> None:
        """Commit transaction.

        Raises:
            UpstreamError: If the database rejects the commit.
        """
        session = self._require_session()
        try:
            await session.commit()
        except SQLAlchemyError as e:
            logger.error("unit_of_work.commit_failed", error=str(e))
            await session.rollback()
            raise UpstreamError("Database commit failed") from e

    async def rollback(self) -> None:
        await self._require_session().rollback()

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of Work not started (use async with)")
        return self._session

    @property
    def users(self) -> UserRepository:
        if self._users is None:
            self._users = SQLAlchemyUserRepository(self._require_session())
        return self._users

    @property
    def posts(self) -> PostRepository:
        if self._posts is None:
            self._posts = SQLAlchemyPostRepository(self._require_session())
        return self._posts

    @property
    def files(self) -> FileRepository:
        if self._files is None:
            self._files = SQLAlchemyFileRepository(self._require_session())
        return self._files


def create_unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyUnitOfWork:
    """Factory for a fresh Unit of Work, one per use case invocation."""
    return SQLAlchemyUnitOfWork(session_factory)
