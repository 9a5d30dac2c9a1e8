"""Password recovery handlers."""

from snapix.application.auth.commands import RequestPasswordRecoveryCommand, SetNewPasswordCommand
from snapix.application.auth.ports import PasswordHasher
from snapix.application.notifications import NotificationService, SendEmailDTO
from snapix.application.shared import CommandHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.shared import BadRequestError

logger = get_logger(__name__)


class RequestPasswordRecoveryHandler(CommandHandler[RequestPasswordRecoveryCommand, None]):
    """Issue a 1h recovery code and e-mail it.

    An unknown e-mail completes silently with nothing emitted, so the
    response does not reveal which addresses are registered.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, notifications: NotificationService) -> None:
        self._uow_factory = uow_factory
        self._notifications = notifications

    async def handle(self, command: RequestPasswordRecoveryCommand) -> None:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(command.email)
            if user is None:
                logger.info("password_recovery.unknown_email")
                return

            code = user.start_password_recovery()
            await uow.users.save(user)
            await uow.commit()

        logger.info("password_recovery.code_issued", user_id=user.id)
        await self._notifications.send_recovery_password_temp_code(
            SendEmailDTO(email=user.email, code=code)
        )


class SetNewPasswordHandler(CommandHandler[SetNewPasswordCommand, None]):
    def __init__(self, uow_factory: UnitOfWorkFactory, hasher: PasswordHasher) -> None:
        self._uow_factory = uow_factory
        self._hasher = hasher

    async def handle(self, command: SetNewPasswordCommand) -> None:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_recovery_code(command.recovery_code)
            if user is None:
                raise BadRequestError("Recovery code is invalid or expired")

            user.reset_password(command.recovery_code, self._hasher.hash(command.new_password))
            await uow.users.save(user)
            await uow.commit()

        logger.info("set_new_password.completed", user_id=user.id)
