"""Base Handler classes for Commands and Queries."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class for command handlers.

    A command handler:
    - Loads aggregates through a unit of work
    - Runs domain logic (aggregate methods)
    - Commits
    - Publishes domain events after the commit

    Handlers receive collaborators in the constructor and keep no per-request
    state, so one instance is registered with the dispatcher at startup.

    Example:
        >>> class DeletePostHandler(CommandHandler[DeletePostCommand, None]):
        ...     def __init__(self, uow_factory: UnitOfWorkFactory, files: ImageFilesFacade):
        ...         self._uow_factory = uow_factory
        ...         self._files = files
        ...
        ...     async def handle(self, command: DeletePostCommand) -> None:
        ...         async with self._uow_factory() as uow:
        ...             post = await uow.posts.get_by_id(command.post_id)
        ...             ...
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Raises:
            DomainException: If a business rule is violated.
        """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class for query handlers.

    Query handlers read through repositories or the storage facade and return
    DTOs. They MUST NOT have side effects.
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        pass
