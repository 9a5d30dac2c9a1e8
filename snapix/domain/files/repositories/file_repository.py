"""FileRepository Port - persistence interface for file records."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..entities import FileRecord


class FileRepository(ABC):
    """Abstract interface for file record persistence.

    Filters are plain equality on record attributes, e.g.
    ``find_one(owner_id="7", type=FileType.AVATAR)``.
    """

    @abstractmethod
    async def save(self, record: FileRecord) -> FileRecord:
        pass

    @abstractmethod
    async def find_one(self, **filters: Any) -> Optional[FileRecord]:
        """First record matching every filter, or None."""

    @abstractmethod
    async def find_many(self, **filters: Any) -> list[FileRecord]:
        pass

    @abstractmethod
    async def delete_one(self, file_id: str) -> None:
        """Delete exactly one record by id."""
