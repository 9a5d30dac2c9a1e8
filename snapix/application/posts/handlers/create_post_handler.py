"""CreatePost Handler - create a post around an uploaded image."""

from snapix.application.files import ImageFilesFacade
from snapix.application.posts.commands import CreatePostCommand
from snapix.application.posts.dtos import PostDTO
from snapix.application.shared import CommandHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.posts.entities import Post
from snapix.domain.shared import BadRequestError, ForbiddenError, NotFoundError
from snapix.infrastructure.messaging import EventBus

logger = get_logger(__name__)


class CreatePostHandler(CommandHandler[CreatePostCommand, PostDTO]):
    """Handler for CreatePost command.

    Flow:
    1. Look the image up through the files facade
    2. No such image → NotFoundError, nothing saved
    3. Image uploaded by someone else → ForbiddenError
    4. Image already attached to a post → BadRequestError
    5. Save the post and commit
    6. Publish ``post.create`` carrying the persisted post

    Example:
        >>> command = CreatePostCommand(user_id=7, content=None, image_id="3f2b...")
        >>> post_dto = await handler.handle(command)
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

    async def handle(self, command: CreatePostCommand) -> PostDTO:
        logger.info("create_post.started", user_id=command.user_id, image_id=command.image_id)

        image = await self._files.get_image(command.image_id)
        if not image.files:
            raise NotFoundError("Image not found", image_id=command.image_id)
        if image.files[0].owner_id != str(command.user_id):
            raise ForbiddenError("Image belongs to another user", image_id=command.image_id)

        async with self._uow_factory() as uow:
            if await uow.posts.exists_by_image_id(command.image_id):
                raise BadRequestError(
                    "Image is already attached to a post", image_id=command.image_id
                )
            post = Post.create_post(
                author_id=command.user_id,
                image_id=command.image_id,
                content=command.content,
            )
            await uow.posts.save(post)
            await uow.commit()

        # Publish after commit, once the id exists
        post.record_created()
        await self._event_bus.publish_all(post.pull_domain_events())

        logger.info("create_post.completed", post_id=post.id, user_id=command.user_id)
        return PostDTO.from_entity(post)
