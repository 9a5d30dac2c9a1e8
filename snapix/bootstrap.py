"""Composition root - wires settings, adapters, handlers and the dispatcher.

Every handler is constructed exactly once here and registered under the one
message type it handles. ``build_container`` verifies that every known
message type has a handler before the application starts serving.
"""

from dataclasses import dataclass
from typing import Optional

from celery import Celery
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from snapix.application.auth.commands import (
    ConfirmRegistrationCommand,
    LoginCommand,
    RefreshTokensCommand,
    RegisterUserCommand,
    RequestPasswordRecoveryCommand,
    SetNewPasswordCommand,
)
from snapix.application.auth.handlers import (
    ConfirmRegistrationHandler,
    LoginHandler,
    RefreshTokensHandler,
    RegisterUserHandler,
    RequestPasswordRecoveryHandler,
    SetNewPasswordHandler,
)
from snapix.application.auth.ports import PasswordHasher, TokenService
from snapix.application.files import ImageFilesFacade
from snapix.application.files.commands import (
    DeleteAvatarFileCommand,
    DeleteFileCommand,
    UploadAvatarFileCommand,
    UploadPostImageCommand,
)
from snapix.application.files.handlers import (
    DeleteAvatarFileHandler,
    DeleteFileHandler,
    GetAvatarFileHandler,
    GetImageHandler,
    UploadAvatarFileHandler,
    UploadPostImageHandler,
)
from snapix.application.files.queries import GetAvatarFileQuery, GetImageQuery
from snapix.application.notifications import NotificationService
from snapix.application.posts.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from snapix.application.posts.handlers import (
    CreatePostHandler,
    DeletePostHandler,
    GetPostHandler,
    UpdatePostHandler,
)
from snapix.application.posts.queries import GetPostQuery
from snapix.application.posts.subscribers import register_post_subscribers
from snapix.application.shared import Dispatcher, UnitOfWork
from snapix.application.users.commands import (
    DeleteAvatarCommand,
    FillOutProfileCommand,
    UploadAvatarCommand,
)
from snapix.application.users.handlers import (
    CountRegisteredUsersHandler,
    DeleteAvatarHandler,
    FillOutProfileHandler,
    GetAvatarHandler,
    GetProfileInfoHandler,
    UploadAvatarHandler,
)
from snapix.application.users.queries import (
    CountRegisteredUsersQuery,
    GetAvatarQuery,
    GetProfileInfoQuery,
)
from snapix.config.logging import get_logger
from snapix.config.settings import Settings
from snapix.domain.files.ports import StorageAdapter
from snapix.domain.notifications.ports import NotificationClient
from snapix.infrastructure.auth import BcryptPasswordHasher, JWTManager
from snapix.infrastructure.messaging import (
    CeleryNotificationClient,
    EventBus,
    create_celery_app,
)
from snapix.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_factory,
    create_unit_of_work,
)
from snapix.infrastructure.storage import LocalStorageAdapter

logger = get_logger(__name__)

# Every message type the application dispatches
MESSAGE_TYPES: tuple[type, ...] = (
    # Files
    UploadAvatarFileCommand,
    UploadPostImageCommand,
    DeleteAvatarFileCommand,
    DeleteFileCommand,
    GetAvatarFileQuery,
    GetImageQuery,
    # Users
    CountRegisteredUsersQuery,
    GetProfileInfoQuery,
    FillOutProfileCommand,
    GetAvatarQuery,
    UploadAvatarCommand,
    DeleteAvatarCommand,
    # Posts
    CreatePostCommand,
    GetPostQuery,
    UpdatePostCommand,
    DeletePostCommand,
    # Auth
    RegisterUserCommand,
    ConfirmRegistrationCommand,
    RequestPasswordRecoveryCommand,
    SetNewPasswordCommand,
    LoginCommand,
    RefreshTokensCommand,
)


@dataclass
class Container:
    """Application-wide singletons built at startup."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    dispatcher: Dispatcher
    event_bus: EventBus
    files: ImageFilesFacade
    storage: StorageAdapter
    notifications: NotificationService
    tokens: TokenService
    celery_app: Optional[Celery] = None

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_container(
    settings: Settings,
    *,
    engine: Optional[AsyncEngine] = None,
    storage: Optional[StorageAdapter] = None,
    notification_client: Optional[NotificationClient] = None,
    hasher: Optional[PasswordHasher] = None,
) -> Container:
    """Build and verify the object graph.

    Args:
        settings: Loaded settings.
        engine: Engine to use instead of one built from ``DATABASE_URL``.
        storage: Storage adapter instead of the local disk adapter.
        notification_client: Client instead of the Celery one.
        hasher: Password hasher instead of bcrypt.

    Raises:
        HandlerNotFoundError: If a message type has no handler.
    """
    engine = engine or create_engine(settings)
    session_factory = create_session_factory(engine)

    def uow_factory() -> UnitOfWork:
        return create_unit_of_work(session_factory)

    celery_app: Optional[Celery] = None
    if notification_client is None:
        celery_app = create_celery_app(settings)
        notification_client = CeleryNotificationClient(celery_app)

    storage = storage or LocalStorageAdapter(settings.storage_root, settings.storage_public_url)
    hasher = hasher or BcryptPasswordHasher()
    tokens = JWTManager.from_settings(settings)
    notifications = NotificationService(notification_client)

    event_bus = EventBus()
    register_post_subscribers(event_bus)

    dispatcher = Dispatcher()
    files = ImageFilesFacade(dispatcher)

    # ==================== Files ====================
    dispatcher.register(UploadAvatarFileCommand, UploadAvatarFileHandler(uow_factory, storage))
    dispatcher.register(UploadPostImageCommand, UploadPostImageHandler(uow_factory, storage))
    dispatcher.register(DeleteAvatarFileCommand, DeleteAvatarFileHandler(uow_factory, storage))
    dispatcher.register(DeleteFileCommand, DeleteFileHandler(uow_factory, storage))
    dispatcher.register(GetAvatarFileQuery, GetAvatarFileHandler(uow_factory))
    dispatcher.register(GetImageQuery, GetImageHandler(uow_factory))

    # ==================== Users ====================
    dispatcher.register(CountRegisteredUsersQuery, CountRegisteredUsersHandler(uow_factory))
    dispatcher.register(GetProfileInfoQuery, GetProfileInfoHandler(uow_factory))
    dispatcher.register(FillOutProfileCommand, FillOutProfileHandler(uow_factory))
    dispatcher.register(GetAvatarQuery, GetAvatarHandler(files))
    dispatcher.register(UploadAvatarCommand, UploadAvatarHandler(files))
    dispatcher.register(DeleteAvatarCommand, DeleteAvatarHandler(files))

    # ==================== Posts ====================
    dispatcher.register(CreatePostCommand, CreatePostHandler(uow_factory, files, event_bus))
    dispatcher.register(GetPostQuery, GetPostHandler(uow_factory))
    dispatcher.register(UpdatePostCommand, UpdatePostHandler(uow_factory))
    dispatcher.register(DeletePostCommand, DeletePostHandler(uow_factory, files, event_bus))

    # ==================== Auth ====================
    dispatcher.register(
        RegisterUserCommand, RegisterUserHandler(uow_factory, hasher, notifications)
    )
    dispatcher.register(ConfirmRegistrationCommand, ConfirmRegistrationHandler(uow_factory))
    dispatcher.register(
        RequestPasswordRecoveryCommand,
        RequestPasswordRecoveryHandler(uow_factory, notifications),
    )
    dispatcher.register(SetNewPasswordCommand, SetNewPasswordHandler(uow_factory, hasher))
    dispatcher.register(LoginCommand, LoginHandler(uow_factory, hasher, tokens))
    dispatcher.register(RefreshTokensCommand, RefreshTokensHandler(uow_factory, tokens))

    dispatcher.verify(MESSAGE_TYPES)
    logger.info("bootstrap.container_built", handlers=len(dispatcher.registered_types))

    return Container(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        dispatcher=dispatcher,
        event_bus=event_bus,
        files=files,
        storage=storage,
        notifications=notifications,
        tokens=tokens,
        celery_app=celery_app,
    )
