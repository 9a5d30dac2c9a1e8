"""SQLAlchemyFileRepository - implements the FileRepository port."""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from snapix.domain.files.entities import FileRecord
from snapix.domain.files.repositories import FileRepository

from ..mappers import FileMapper
from ..models import FileModel
from .base import flush


def _normalize(filters: dict[str, Any]) -> dict[str, Any]:
    """Turn enum filter values (``type=FileType.AVATAR``) into column values."""
    return {k: v.value if isinstance(v, Enum) else v for k, v in filters.items()}


class SQLAlchemyFileRepository(FileRepository):
    """SQLAlchemy implementation of FileRepository.

    Filters map one-to-one onto FileModel columns; an unknown name raises
    ``sqlalchemy.exc.InvalidRequestError``.

    Example:
        >>> record = await repo.find_one(owner_id="7", type=FileType.AVATAR)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._mapper = FileMapper()

    async def save(self, record: FileRecord) -> FileRecord:
        # Ids are assigned by the entity, so an id does not imply a row
        model = await self._session.get(FileModel, record.id)
        if model is None:
            self._session.add(self._mapper.to_model(record))
        else:
            self._mapper.update_model(record, model)
        await flush(self._session, "file")
        return record

    async def find_one(self, **filters: Any) -> Optional[FileRecord]:
        stmt = (
            select(FileModel)
            .filter_by(**_normalize(filters))
            .order_by(FileModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def find_many(self, **filters: Any) -> list[FileRecord]:
        stmt = (
            select(FileModel)
            .filter_by(**_normalize(filters))
            .order_by(FileModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def delete_one(self, file_id: str) -> None:
        await self._session.execute(delete(FileModel).where(FileModel.id == file_id))
