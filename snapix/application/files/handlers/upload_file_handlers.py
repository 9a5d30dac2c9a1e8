"""Upload handlers - write the object, then the record."""

from snapix.application.files.commands import (
    UploadAvatarFileCommand,
    UploadPostImageCommand,
)
from snapix.application.files.dtos import FileDTO
from snapix.application.shared import CommandHandler, UnitOfWork, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.files.entities import FileRecord
from snapix.domain.files.entities.file_record import build_object_key
from snapix.domain.files.ports import StorageAdapter
from snapix.domain.files.value_objects import FileType

logger = get_logger(__name__)


class _StoreFileMixin:
    _storage: StorageAdapter

    async def _store(
        self,
        uow: UnitOfWork,
        owner_id: str,
        file_type: FileType,
        content: bytes,
        mimetype: str,
        original_name: str,
    ) -> FileRecord:
        key = build_object_key(file_type, owner_id, mimetype)
        stored = await self._storage.upload(key, content, mimetype)

        record = FileRecord.from_stored(
            owner_id=owner_id,
            file_type=file_type,
            stored=stored,
            original_name=original_name,
            mimetype=mimetype,
        )
        await uow.files.save(record)
        return record


class UploadAvatarFileHandler(
    _StoreFileMixin, CommandHandler[UploadAvatarFileCommand, FileDTO]
):
    """Replace the owner's avatar.

    Flow:
    1. Find the current avatar record (if any)
    2. Delete its object, then its row
    3. Store the new object and save its record
    4. Commit

    Storage writes are not part of the database transaction: a failed commit
    leaves the new object orphaned and the old object already gone.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, storage: StorageAdapter) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def handle(self, command: UploadAvatarFileCommand) -> FileDTO:
        async with self._uow_factory() as uow:
            current = await uow.files.find_one(owner_id=command.owner_id, type=FileType.AVATAR)
            if current is not None:
                await self._storage.delete(current.key)
                await uow.files.delete_one(current.id)
                logger.info(
                    "upload_avatar.previous_removed",
                    owner_id=command.owner_id,
                    file_id=current.id,
                )

            record = await self._store(
                uow,
                owner_id=command.owner_id,
                file_type=FileType.AVATAR,
                content=command.content,
                mimetype=command.mimetype,
                original_name=command.original_name,
            )
            await uow.commit()

        logger.info("upload_avatar.completed", owner_id=command.owner_id, file_id=record.id)
        return FileDTO.from_entity(record)


class UploadPostImageHandler(
    _StoreFileMixin, CommandHandler[UploadPostImageCommand, FileDTO]
):
    def __init__(self, uow_factory: UnitOfWorkFactory, storage: StorageAdapter) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def handle(self, command: UploadPostImageCommand) -> FileDTO:
        async with self._uow_factory() as uow:
            record = await self._store(
                uow,
                owner_id=command.owner_id,
                file_type=FileType.POST_IMAGE,
                content=command.content,
                mimetype=command.mimetype,
                original_name=command.original_name,
            )
            await uow.commit()

        logger.info("upload_post_image.completed", owner_id=command.owner_id, file_id=record.id)
        return FileDTO.from_entity(record)
