"""Read handlers for stored files."""

from snapix.application.files.dtos import FileDTO, FilesViewDTO
from snapix.application.files.queries import GetAvatarFileQuery, GetImageQuery
from snapix.application.shared import QueryHandler, UnitOfWorkFactory
from snapix.domain.files.value_objects import FileType


class GetAvatarFileHandler(QueryHandler[GetAvatarFileQuery, FilesViewDTO]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: GetAvatarFileQuery) -> FilesViewDTO:
        async with self._uow_factory() as uow:
            records = await uow.files.find_many(owner_id=query.owner_id, type=FileType.AVATAR)
        return FilesViewDTO(files=[FileDTO.from_entity(r) for r in records])


class GetImageHandler(QueryHandler[GetImageQuery, FilesViewDTO]):
    """Look up a post image by id. Absent id → empty ``files``."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: GetImageQuery) -> FilesViewDTO:
        async with self._uow_factory() as uow:
            record = await uow.files.find_one(id=query.image_id, type=FileType.POST_IMAGE)
        if record is None:
            return FilesViewDTO(files=[])
        return FilesViewDTO(files=[FileDTO.from_entity(record)])
