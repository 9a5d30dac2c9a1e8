"""Read, edit and delete handlers for posts."""

from snapix.application.files import ImageFilesFacade
from snapix.application.posts.commands import DeletePostCommand, UpdatePostCommand
from snapix.application.posts.dtos import PostDTO
from snapix.application.posts.queries import GetPostQuery
from snapix.application.shared import CommandHandler, QueryHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.shared import NotFoundError
from snapix.infrastructure.messaging import EventBus

logger = get_logger(__name__)


class GetPostHandler(QueryHandler[GetPostQuery, PostDTO]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: GetPostQuery) -> PostDTO:
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(query.post_id)
        if post is None:
            raise NotFoundError("Post not found", post_id=query.post_id)
        return PostDTO.from_entity(post)


class UpdatePostHandler(CommandHandler[UpdatePostCommand, PostDTO]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, command: UpdatePostCommand) -> PostDTO:
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(command.post_id)
            if post is None:
                raise NotFoundError("Post not found", post_id=command.post_id)
            post.ensure_author(command.user_id)

            post.edit(command.content)
            await uow.posts.save(post)
            await uow.commit()

        logger.info("update_post.completed", post_id=post.id)
        return PostDTO.from_entity(post)


class DeletePostHandler(CommandHandler[DeletePostCommand, None]):
    """Handler for DeletePost command.

    Flow:
    1. Load the post, check the caller is the author
    2. Delete the image through the files facade
    3. Delete the post row and commit
    4. Publish ``post.delete``

    If the image delete fails the post row is kept.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        files: ImageFilesFacade,
        event_bus: EventBus,
    ) -> None:
        self._uow_factory = uow_factory
        self._files = files
        self._event_bus = event_bus

    async def handle(self, command: DeletePostCommand) -> None:
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(command.post_id)
            if post is None:
                raise NotFoundError("Post not found", post_id=command.post_id)
            post.ensure_author(command.user_id)

        await self._files.delete_image(post.image_id, owner_id=post.author_id)

        async with self._uow_factory() as uow:
            await uow.posts.delete_one(post.id)
            await uow.commit()

        post.mark_deleted()
        await self._event_bus.publish_all(post.pull_domain_events())
        logger.info("delete_post.completed", post_id=command.post_id, user_id=command.user_id)
