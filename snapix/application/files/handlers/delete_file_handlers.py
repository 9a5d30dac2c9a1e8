"""Delete handlers - remove the stored object first, then the record."""

from snapix.application.files.commands import DeleteAvatarFileCommand, DeleteFileCommand
from snapix.application.shared import CommandHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.files.ports import StorageAdapter
from snapix.domain.files.value_objects import FileType
from snapix.domain.shared import BadRequestError, ForbiddenError, NotFoundError

logger = get_logger(__name__)


class DeleteAvatarFileHandler(CommandHandler[DeleteAvatarFileCommand, None]):
    """Handler for DeleteAvatarFile command.

    Flow:
    1. Find the avatar record by ``{owner_id, type=avatar}``
    2. Missing → BadRequestError, storage untouched
    3. Delete the object by the record's key
    4. Delete exactly one row, commit
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, storage: StorageAdapter) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def handle(self, command: DeleteAvatarFileCommand) -> None:
        async with self._uow_factory() as uow:
            record = await uow.files.find_one(owner_id=command.owner_id, type=FileType.AVATAR)
            if record is None:
                raise BadRequestError("User has no avatar", owner_id=command.owner_id)

            await self._storage.delete(record.key)
            await uow.files.delete_one(record.id)
            await uow.commit()

        logger.info("delete_avatar_file.completed", owner_id=command.owner_id, file_id=record.id)


class DeleteFileHandler(CommandHandler[DeleteFileCommand, None]):
    def __init__(self, uow_factory: UnitOfWorkFactory, storage: StorageAdapter) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def handle(self, command: DeleteFileCommand) -> None:
        async with self._uow_factory() as uow:
            record = await uow.files.find_one(id=command.file_id)
            if record is None:
                raise NotFoundError("File not found", file_id=command.file_id)
            if record.owner_id != command.owner_id:
                raise ForbiddenError("File belongs to another user", file_id=command.file_id)

            await self._storage.delete(record.key)
            await uow.files.delete_one(record.id)
            await uow.commit()

        logger.info("delete_file.completed", file_id=command.file_id)
