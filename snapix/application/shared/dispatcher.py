"""Dispatcher - routes a command or query to its single registered handler.

The registry is an explicit mapping from message class to handler instance,
filled by the composition root. Lookup uses the exact runtime type of the
message (subclasses are not matched to a parent's handler).
"""

from typing import Any, Iterable, Union

from snapix.config.logging import get_logger

from .command import Command
from .handler import CommandHandler, QueryHandler
from .query import Query

logger = get_logger(__name__)

Message = Union[Command, Query]
Handler = Union[CommandHandler[Any, Any], QueryHandler[Any, Any]]


class DispatchError(Exception):
    """Programming/registration error. Never user-facing."""


class HandlerNotFoundError(DispatchError):
    """No handler is registered for a message type."""

    def __init__(self, *message_types: type) -> None:
        self.message_types = message_types
        names = ", ".join(t.__name__ for t in message_types)
        super().__init__(f"No handler registered for: {names}")


class DuplicateHandlerError(DispatchError):
    """A second handler claimed an already registered message type."""

    def __init__(self, message_type: type, existing: Handler) -> None:
        self.message_type = message_type
        super().__init__(
            f"{message_type.__name__} is already handled by {type(existing).__name__}"
        )


class Dispatcher:
    """Type-keyed command/query bus.

    Example:
        >>> dispatcher = Dispatcher()
        >>> dispatcher.register(CreatePostCommand, CreatePostHandler(...))
        >>> dispatcher.register(GetPostQuery, GetPostHandler(...))
        >>> dispatcher.verify([CreatePostCommand, GetPostQuery])  # at startup
        >>> post = await dispatcher.dispatch(CreatePostCommand(...))
    """

    def __init__(self) -> None:
        self._handlers: dict[type, Handler] = {}

    def register(self, message_type: type, handler: Handler) -> None:
        """Bind ``handler`` to ``message_type``.

        Raises:
            TypeError: If ``message_type`` is not a Command or Query class.
            DuplicateHandlerError: If the type already has a handler.
        """
        if not (isinstance(message_type, type) and issubclass(message_type, (Command, Query))):
            raise TypeError(f"{message_type!r} is not a Command or Query type")

        existing = self._handlers.get(message_type)
        if existing is not None:
            raise DuplicateHandlerError(message_type, existing)

        self._handlers[message_type] = handler
        logger.debug(
            "dispatcher.handler_registered",
            message_type=message_type.__name__,
            handler=type(handler).__name__,
        )

    def verify(self, message_types: Iterable[type]) -> None:
        """Fail fast when any of ``message_types`` has no handler.

        Raises:
            HandlerNotFoundError: Naming every missing type.
        """
        missing = [t for t in message_types if t not in self._handlers]
        if missing:
            raise HandlerNotFoundError(*missing)

    @property
    def registered_types(self) -> frozenset[type]:
        return frozenset(self._handlers)

    async def dispatch(self, message: Message) -> Any:
        """Run the handler registered for ``type(message)`` once and return its result.

        Raises:
            HandlerNotFoundError: If nothing is registered for the type.
        """
        message_type = type(message)
        handler = self._handlers.get(message_type)
        if handler is None:
            logger.error("dispatcher.handler_not_found", message_type=message_type.__name__)
            raise HandlerNotFoundError(message_type)

        logger.debug(
            "dispatcher.dispatching",
            message_type=message_type.__name__,
            handler=type(handler).__name__,
        )
        return await handler.handle(message)
