"""Integration tests for SQLAlchemyUnitOfWork."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from snapix.domain.shared import UpstreamError
from snapix.domain.users.entities import User
from snapix.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork


class TestUnitOfWork:
    """Integration tests for the Unit of Work pattern."""

    @pytest.mark.asyncio
    async def test_commit_transaction(self, session_factory, sample_user_data):
        # Arrange
        uow = SQLAlchemyUnitOfWork(session_factory)

        # Act
        async with uow:
            user = User.register(**sample_user_data)
            await uow.users.save(user)
            await uow.commit()

        # Assert
        async with uow:
            assert (await uow.users.get_by_id(user.id)).email == "neo@zion.io"

    @pytest.mark.asyncio
    async def test_rollback_on_exception(self, session_factory, sample_user_data):
        """Test: An exception inside the block discards the changes."""
        uow = SQLAlchemyUnitOfWork(session_factory)

        with pytest.raises(ValueError):
            async with uow:
                await uow.users.save(User.register(**sample_user_data))
                raise ValueError("Test exception")

        async with uow:
            assert await uow.users.count() == 0

    @pytest.mark.asyncio
    async def test_no_commit_discards_changes(self, session_factory, sample_user_data):
        uow = SQLAlchemyUnitOfWork(session_factory)

        async with uow:
            await uow.users.save(User.register(**sample_user_data))

        async with uow:
            assert await uow.users.count() == 0

    @pytest.mark.asyncio
    async def test_commit_failure_raises_upstream_error(self, session_factory, sample_user_data, monkeypatch):
        # Arrange
        async def failing_commit(self):
            raise OperationalError("COMMIT", {}, Exception("database is gone"))

        monkeypatch.setattr(AsyncSession, "commit", failing_commit)
        uow = SQLAlchemyUnitOfWork(session_factory)

        # Act & Assert
        with pytest.raises(UpstreamError):
            async with uow:
                await uow.users.save(User.register(**sample_user_data))
                await uow.commit()

    @pytest.mark.asyncio
    async def test_repositories_require_open_block(self, session_factory):
        uow = SQLAlchemyUnitOfWork(session_factory)

        with pytest.raises(RuntimeError):
            uow.users
