"""ImageFilesFacade - the users/posts contexts' view of file storage.

Other contexts never touch the storage adapter or the files table directly:
they call this facade, which dispatches the files context's own commands and
queries.
"""

from snapix.application.shared import Dispatcher

from .commands import (
    DeleteAvatarFileCommand,
    DeleteFileCommand,
    UploadAvatarFileCommand,
    UploadPostImageCommand,
)
from .dtos import FileDTO, FilesViewDTO
from .queries import GetAvatarFileQuery, GetImageQuery


class ImageFilesFacade:
    """Image storage operations keyed by owner or image id.

    Owner ids are passed as strings; callers holding an integer user id
    convert it here.

    Example:
        >>> image = await facade.get_image("3f2b...")
        >>> if not image.files:
        ...     raise NotFoundError("Image not found")
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    async def get_image(self, image_id: str) -> FilesViewDTO:
        return await self._dispatcher.dispatch(GetImageQuery(image_id=image_id))

    async def get_avatar(self, owner_id: int | str) -> FilesViewDTO:
        return await self._dispatcher.dispatch(GetAvatarFileQuery(owner_id=str(owner_id)))

    async def upload_avatar(
        self,
        owner_id: int | str,
        content: bytes,
        mimetype: str,
        original_name: str,
    ) -> FileDTO:
        return await self._dispatcher.dispatch(
            UploadAvatarFileCommand(
                owner_id=str(owner_id),
                content=content,
                mimetype=mimetype,
                original_name=original_name,
            )
        )

    async def upload_post_image(
        self,
        owner_id: int | str,
        content: bytes,
        mimetype: str,
        original_name: str,
    ) -> FileDTO:
        return await self._dispatcher.dispatch(
            UploadPostImageCommand(
                owner_id=str(owner_id),
                content=content,
                mimetype=mimetype,
                original_name=original_name,
            )
        )

    async def delete_avatar(self, owner_id: int | str) -> None:
        """Raises BadRequestError when the owner has no avatar."""
        await self._dispatcher.dispatch(DeleteAvatarFileCommand(owner_id=str(owner_id)))

    async def delete_image(self, image_id: str, owner_id: int | str) -> None:
        """Delete a post image.

        Raises:
            NotFoundError: If no file has ``image_id``.
            ForbiddenError: If the file belongs to someone else.
        """
        await self._dispatcher.dispatch(
            DeleteFileCommand(file_id=image_id, owner_id=str(owner_id))
        )
