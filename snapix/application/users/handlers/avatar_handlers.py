"""Avatar handlers - thin use cases over the files facade."""

from snapix.application.files import ImageFilesFacade
from snapix.application.shared import CommandHandler, QueryHandler
from snapix.application.users.commands import DeleteAvatarCommand, UploadAvatarCommand
from snapix.application.users.dtos import AvatarDTO
from snapix.application.users.queries import GetAvatarQuery
from snapix.config.logging import get_logger
from snapix.domain.shared import NotFoundError

logger = get_logger(__name__)


class GetAvatarHandler(QueryHandler[GetAvatarQuery, AvatarDTO]):
    def __init__(self, files: ImageFilesFacade) -> None:
        self._files = files

    async def handle(self, query: GetAvatarQuery) -> AvatarDTO:
        view = await self._files.get_avatar(query.user_id)
        if not view.files:
            raise NotFoundError("Avatar not found", user_id=query.user_id)
        return AvatarDTO.from_file(view.files[0])


class UploadAvatarHandler(CommandHandler[UploadAvatarCommand, AvatarDTO]):
    """Store a new avatar. The files context removes the previous one first."""

    def __init__(self, files: ImageFilesFacade) -> None:
        self._files = files

    async def handle(self, command: UploadAvatarCommand) -> AvatarDTO:
        logger.info(
            "upload_avatar.started",
            owner_id=command.owner_id,
            mimetype=command.mimetype,
            size=len(command.content),
        )
        file = await self._files.upload_avatar(
            owner_id=command.owner_id,
            content=command.content,
            mimetype=command.mimetype,
            original_name=command.original_name,
        )
        return AvatarDTO.from_file(file)


class DeleteAvatarHandler(CommandHandler[DeleteAvatarCommand, None]):
    def __init__(self, files: ImageFilesFacade) -> None:
        self._files = files

    async def handle(self, command: DeleteAvatarCommand) -> None:
        await self._files.delete_avatar(command.user_id)
