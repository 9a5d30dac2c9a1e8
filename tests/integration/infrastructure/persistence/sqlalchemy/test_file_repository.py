"""Integration tests for SQLAlchemyFileRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from snapix.domain.files.entities import FileRecord
from snapix.domain.files.value_objects import FileType
from snapix.infrastructure.persistence.sqlalchemy import SQLAlchemyFileRepository


def make_record(owner_id="7", file_type=FileType.AVATAR, created_at=None):
    key = f"{file_type.value}/{owner_id}/x.png"
    return FileRecord(
        owner_id=owner_id,
        type=file_type,
        key=key,
        url=f"http://localhost:3000/static/{key}",
        original_name="x.png",
        mimetype="image/png",
        size=10,
        created_at=created_at,
    )


class TestFileRepository:
    """Integration tests for the files table."""

    @pytest.mark.asyncio
    async def test_find_one_by_owner_and_type(self, session):
        """Test: Enum filter values match the stored column."""
        # Arrange
        repo = SQLAlchemyFileRepository(session)
        avatar = make_record()
        await repo.save(avatar)
        await repo.save(make_record(file_type=FileType.POST_IMAGE))

        # Act
        found = await repo.find_one(owner_id="7", type=FileType.AVATAR)

        # Assert
        assert found.id == avatar.id
        assert found.type is FileType.AVATAR

    @pytest.mark.asyncio
    async def test_find_one_newest_first(self, session):
        repo = SQLAlchemyFileRepository(session)
        now = datetime.now(timezone.utc)
        older = make_record(created_at=now - timedelta(minutes=5))
        newer = make_record(created_at=now)
        await repo.save(older)
        await repo.save(newer)

        found = await repo.find_one(owner_id="7", type=FileType.AVATAR)

        assert found.id == newer.id

    @pytest.mark.asyncio
    async def test_find_many(self, session):
        repo = SQLAlchemyFileRepository(session)
        await repo.save(make_record())
        await repo.save(make_record())
        await repo.save(make_record(owner_id="8"))

        found = await repo.find_many(owner_id="7", type=FileType.AVATAR)

        assert len(found) == 2
        assert {r.owner_id for r in found} == {"7"}

    @pytest.mark.asyncio
    async def test_find_by_id(self, session):
        repo = SQLAlchemyFileRepository(session)
        record = make_record(file_type=FileType.POST_IMAGE)
        await repo.save(record)

        assert (await repo.find_one(id=record.id, type=FileType.POST_IMAGE)).id == record.id
        assert await repo.find_one(id=record.id, type=FileType.AVATAR) is None

    @pytest.mark.asyncio
    async def test_delete_one(self, session):
        repo = SQLAlchemyFileRepository(session)
        record = make_record()
        other = make_record()
        await repo.save(record)
        await repo.save(other)

        await repo.delete_one(record.id)

        assert await repo.find_one(id=record.id) is None
        assert await repo.find_one(id=other.id) is not None
