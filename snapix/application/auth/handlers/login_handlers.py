"""Login and token refresh handlers."""

from snapix.application.auth.commands import LoginCommand, RefreshTokensCommand
from snapix.application.auth.dtos import TokenPairDTO
from snapix.application.auth.ports import PasswordHasher, TokenService
from snapix.application.shared import CommandHandler, UnitOfWorkFactory
from snapix.config.logging import get_logger
from snapix.domain.shared import UnauthorizedError

logger = get_logger(__name__)


def _issue_pair(tokens: TokenService, user_id: int) -> TokenPairDTO:
    return TokenPairDTO(
        access_token=tokens.create_access_token(user_id),
        refresh_token=tokens.create_refresh_token(user_id),
    )


class LoginHandler(CommandHandler[LoginCommand, TokenPairDTO]):
    """Exchange e-mail and password for a token pair.

    Unknown e-mail and wrong password fail with the same message.

    Raises:
        UnauthorizedError: Wrong credentials or unconfirmed e-mail.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = hasher
        self._tokens = tokens

    async def handle(self, command: LoginCommand) -> TokenPairDTO:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(command.email)

        if user is None or not self._hasher.verify(command.password, user.password_hash):
            logger.warning("login.invalid_credentials")
            raise UnauthorizedError("Invalid email or password")
        if not user.is_confirmed:
            raise UnauthorizedError("Email is not confirmed", user_id=user.id)

        logger.info("login.completed", user_id=user.id)
        return _issue_pair(self._tokens, user.id)


class RefreshTokensHandler(CommandHandler[RefreshTokensCommand, TokenPairDTO]):
    def __init__(self, uow_factory: UnitOfWorkFactory, tokens: TokenService) -> None:
        self._uow_factory = uow_factory
        self._tokens = tokens

    async def handle(self, command: RefreshTokensCommand) -> TokenPairDTO:
        user_id = self._tokens.verify_refresh_token(command.refresh_token)
        if user_id is None:
            raise UnauthorizedError("Refresh token is invalid or expired")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if user is None:
            raise UnauthorizedError("Refresh token is invalid or expired")

        return _issue_pair(self._tokens, user.id)
