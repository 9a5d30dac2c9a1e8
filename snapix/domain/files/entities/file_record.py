"""FileRecord Entity - database row describing one stored object."""

import mimetypes
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from snapix.domain.shared import Entity

from ..value_objects import FileType, StoredObject

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
}


def build_object_key(file_type: FileType, owner_id: str, mimetype: str) -> str:
    """Build ``{type}/{owner_id}/{uuid}{ext}``.

    Example:
        >>> build_object_key(FileType.AVATAR, "7", "image/png")
        'avatar/7/3f2b...c1.png'
    """
    ext = _EXTENSIONS.get(mimetype) or mimetypes.guess_extension(mimetype) or ""
    return f"{file_type.value}/{owner_id}/{uuid4().hex}{ext}"


class FileRecord(Entity):
    """File record.

    Identity is a uuid string assigned at creation (not by the database), so
    a record can be referenced (e.g. by ``Post.image_id``) before it is saved.
    """

    def __init__(
        self,
        owner_id: str,
        type: FileType,
        key: str,
        url: str,
        original_name: str,
        mimetype: str,
        size: int,
        created_at: Optional[datetime] = None,
        id: Optional[str] = None,
    ) -> None:
        super().__init__(id or uuid4().hex)
        self.owner_id = owner_id
        self.type = type
        self.key = key
        self.url = url
        self.original_name = original_name
        self.mimetype = mimetype
        self.size = size
        self.created_at = created_at or datetime.now(timezone.utc)

    @classmethod
    def from_stored(
        cls,
        owner_id: str,
        file_type: FileType,
        stored: StoredObject,
        original_name: str,
        mimetype: str,
    ) -> "FileRecord":
        return cls(
            owner_id=owner_id,
            type=file_type,
            key=stored.key,
            url=stored.url,
            original_name=original_name,
            mimetype=mimetype,
            size=stored.size,
        )

    def __repr__(self) -> str:
        return f"FileRecord(id={self.id}, type={self.type.value}, key={self.key})"
