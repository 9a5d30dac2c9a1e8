"""StorageAdapter Port - binary object storage."""

from abc import ABC, abstractmethod

from ..value_objects import StoredObject


class StorageAdapter(ABC):
    """Abstract interface for binary object storage.

    Implementations translate their own I/O failures into UpstreamError.
    """

    @abstractmethod
    async def upload(self, key: str, content: bytes, content_type: str) -> StoredObject:
        """Write ``content`` under ``key`` (overwriting) and return its metadata."""

    @abstractmethod
    async def read(self, key: str) -> bytes:
        """Read an object.

        Raises:
            NotFoundError: If nothing is stored under ``key``.
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete an object. A missing key is a no-op."""
