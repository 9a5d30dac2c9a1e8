"""Profile handlers."""

from snapix.application.shared import CommandHandler, QueryHandler, UnitOfWorkFactory
from snapix.application.users.commands import FillOutProfileCommand
from snapix.application.users.dtos import ProfileDTO
from snapix.application.users.queries import CountRegisteredUsersQuery, GetProfileInfoQuery
from snapix.config.logging import get_logger
from snapix.domain.shared import NotFoundError

logger = get_logger(__name__)


class CountRegisteredUsersHandler(QueryHandler[CountRegisteredUsersQuery, int]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: CountRegisteredUsersQuery) -> int:
        async with self._uow_factory() as uow:
            return await uow.users.count()


class GetProfileInfoHandler(QueryHandler[GetProfileInfoQuery, ProfileDTO]):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: GetProfileInfoQuery) -> ProfileDTO:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(query.user_id)
        if user is None:
            raise NotFoundError("User not found", user_id=query.user_id)
        return ProfileDTO.from_entity(user)


class FillOutProfileHandler(CommandHandler[FillOutProfileCommand, ProfileDTO]):
    """Handler for FillOutProfile command.

    Flow:
    1. Load the user (NotFoundError if absent)
    2. Replace the profile fields
    3. Save and commit

    Example:
        >>> command = FillOutProfileCommand(user_id=7, first_name="Trinity", city="Zion")
        >>> profile = await handler.handle(command)
    """

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, command: FillOutProfileCommand) -> ProfileDTO:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(command.user_id)
            if user is None:
                raise NotFoundError("User not found", user_id=command.user_id)

            user.fill_out_profile(
                first_name=command.first_name,
                last_name=command.last_name,
                date_of_birth=command.date_of_birth,
                city=command.city,
                country=command.country,
                about_me=command.about_me,
            )
            await uow.users.save(user)
            await uow.commit()

        logger.info("fill_out_profile.completed", user_id=command.user_id)
        return ProfileDTO.from_entity(user)
