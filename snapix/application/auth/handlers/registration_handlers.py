"""Registration handlers."""

from snapix.application.auth.commands import ConfirmRegistrationCommand, RegisterUserCommand
from snapix.application.auth.ports import PasswordHasher
from snapix.application.notifications import NotificationService, SendEmailDTO
from snapix.application.shared import CommandHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.shared import BadRequestError
from snapix.domain.users.entities import User

logger = get_logger(__name__)


class RegisterUserHandler(CommandHandler[RegisterUserCommand, None]):
    """Handler for RegisterUser command.

    Flow:
    1. Reject a taken e-mail or username (BadRequestError)
    2. Create an unconfirmed user with a hashed password and a 24h code
    3. Save and commit
    4. Emit ``email-notification.confirmation`` with the code
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        hasher: PasswordHasher,
        notifications: NotificationService,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = hasher
        self._notifications = notifications

    async def handle(self, command: RegisterUserCommand) -> None:
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(command.email) is not None:
                raise BadRequestError("User with this email is already registered")
            if await uow.users.get_by_username(command.username) is not None:
                raise BadRequestError("User with this username is already registered")

            user = User.register(
                username=command.username,
                email=command.email,
                password_hash=self._hasher.hash(command.password),
            )
            await uow.users.save(user)
            await uow.commit()

        logger.info("register_user.completed", user_id=user.id)
        await self._notifications.send_email_confirmation_code(
            SendEmailDTO(email=user.email, code=user.confirmation_code)
        )


class ConfirmRegistrationHandler(CommandHandler[ConfirmRegistrationCommand, None]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, command: ConfirmRegistrationCommand) -> None:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_confirmation_code(command.code)
            if user is None:
                raise BadRequestError("Confirmation code is invalid or expired")

            user.confirm(command.code)
            await uow.users.save(user)
            await uow.commit()

        logger.info("confirm_registration.completed", user_id=user.id)
