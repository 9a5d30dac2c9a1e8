"""FileMapper - FileRecord entity ↔ FileModel ORM."""

from snapix.domain.files.entities import FileRecord
from snapix.domain.files.value_objects import FileType

from ..models import FileModel


class FileMapper:
    def to_entity(self, model: FileModel) -> FileRecord:
        return FileRecord(
            id=model.id,
            owner_id=model.owner_id,
            type=FileType(model.type),
            key=model.key,
            url=model.url,
            original_name=model.original_name,
            mimetype=model.mimetype,
            size=model.size,
            created_at=model.created_at,
        )

    def to_model(self, entity: FileRecord) -> FileModel:
        return FileModel(
            id=entity.id,
            owner_id=entity.owner_id,
            type=entity.type.value,
            key=entity.key,
            url=entity.url,
            original_name=entity.original_name,
            mimetype=entity.mimetype,
            size=entity.size,
            created_at=entity.created_at,
        )

    def update_model(self, entity: FileRecord, model: FileModel) -> None:
        model.owner_id = entity.owner_id
        model.type = entity.type.value
        model.key = entity.key
        model.url = entity.url
        model.original_name = entity.original_name
        model.mimetype = entity.mimetype
        model.size = entity.size
