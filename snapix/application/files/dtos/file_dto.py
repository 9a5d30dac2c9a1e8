"""File DTOs - read projections of file records."""

from dataclasses import dataclass, field
from datetime import datetime

from snapix.domain.files.entities import FileRecord


@dataclass
class FileDTO:
    """File data transfer object."""

    id: str
    owner_id: str
    type: str
    key: str
    url: str
    original_name: str
    mimetype: str
    size: int
    created_at: datetime

    @classmethod
    def from_entity(cls, record: FileRecord) -> "FileDTO":
        return cls(
            id=record.id,
            owner_id=record.owner_id,
            type=record.type.value,
            key=record.key,
            url=record.url,
            original_name=record.original_name,
            mimetype=record.mimetype,
            size=record.size,
            created_at=record.created_at,
        )


@dataclass
class FilesViewDTO:
    """Result of a storage lookup. Empty ``files`` means nothing matched."""

    files: list[FileDTO] = field(default_factory=list)
