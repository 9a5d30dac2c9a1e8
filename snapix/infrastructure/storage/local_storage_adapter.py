"""LocalStorageAdapter - StorageAdapter over a directory on local disk.

Objects are written to ``{root}/{key}`` and served (by a static file server
or a CDN in front of it) at ``{public_url}/{key}``.
"""

from pathlib import Path

import aiofiles
import aiofiles.os

from snapix.config.logging import get_logger
from snapix.domain.files.ports import StorageAdapter
from snapix.domain.files.value_objects import StoredObject
from snapix.domain.shared import NotFoundError, UpstreamError, ValidationError

logger = get_logger(__name__)


class LocalStorageAdapter(StorageAdapter):
    """Disk-backed object storage using aiofiles.

    Example:
        >>> storage = LocalStorageAdapter("./storage", "http://localhost:3000/static")
        >>> stored = await storage.upload("avatar/7/3f2b.png", data, "image/png")
        >>> stored.url
        'http://localhost:3000/static/avatar/7/3f2b.png'
    """

    def __init__(self, root: str | Path, public_url: str) -> None:
        self._root = Path(root).resolve()
        self._public_url = public_url.rstrip("/")

    def _path_for(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if self._root not in path.parents:
            raise ValidationError("Object key escapes the storage root", key=key)
        return path

    def url_for(self, key: str) -> str:
        return f"{self._public_url}/{key}"

    async def upload(self, key: str, content: bytes, content_type: str) -> StoredObject:
        path = self._path_for(key)
        try:
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("storage.upload_failed", key=key, error=str(e))
            raise UpstreamError("Failed to store object", key=key) from e

        logger.debug("storage.uploaded", key=key, size=len(content), content_type=content_type)
        return StoredObject(key=key, url=self.url_for(key), size=len(content))

    async def read(self, key: str) -> bytes:
        path = self._path_for(key)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise NotFoundError("Object not found", key=key) from e
        except OSError as e:
            logger.error("storage.read_failed", key=key, error=str(e))
            raise UpstreamError("Failed to read object", key=key) from e

    async def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            logger.warning("storage.delete_missing", key=key)
            return
        except OSError as e:
            logger.error("storage.delete_failed", key=key, error=str(e))
            raise UpstreamError("Failed to delete object", key=key) from e

        logger.debug("storage.deleted", key=key)
