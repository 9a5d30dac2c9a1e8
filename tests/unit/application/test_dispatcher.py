"""Unit tests for the command/query Dispatcher."""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest

from snapix.application.shared import (
    Command,
    Dispatcher,
    DuplicateHandlerError,
    HandlerNotFoundError,
    Query,
)


@dataclass(frozen=True)
class PingCommand(Command):
    value: int


@dataclass(frozen=True)
class LoudPingCommand(PingCommand):
    pass


@dataclass(frozen=True)
class PingQuery(Query):
    pass


def make_handler(result=None):
    handler = MagicMock()
    handler.handle = AsyncMock(return_value=result)
    return handler


class TestRegistration:
    """Tests for register and verify."""

    def test_register_twice_fails(self):
        """Test: A second handler for the same type is rejected."""
        # Arrange
        dispatcher = Dispatcher()
        dispatcher.register(PingCommand, make_handler())

        # Act & Assert
        with pytest.raises(DuplicateHandlerError):
            dispatcher.register(PingCommand, make_handler())

    def test_register_non_message_type_fails(self):
        dispatcher = Dispatcher()

        with pytest.raises(TypeError):
            dispatcher.register(dict, make_handler())

    def test_verify_lists_missing_types(self):
        """Test: verify names every type without a handler."""
        # Arrange
        dispatcher = Dispatcher()
        dispatcher.register(PingCommand, make_handler())

        # Act
        with pytest.raises(HandlerNotFoundError) as exc_info:
            dispatcher.verify([PingCommand, PingQuery, LoudPingCommand])

        # Assert
        assert exc_info.value.message_types == (PingQuery, LoudPingCommand)

    def test_verify_passes_when_complete(self):
        dispatcher = Dispatcher()
        dispatcher.register(PingCommand, make_handler())
        dispatcher.register(PingQuery, make_handler())

        dispatcher.verify([PingCommand, PingQuery])

        assert dispatcher.registered_types == {PingCommand, PingQuery}


class TestDispatch:
    """Tests for dispatch."""

    @pytest.mark.asyncio
    async def test_dispatch_calls_handler_once_and_returns_result(self):
        """Test: The registered handler runs exactly once."""
        # Arrange
        dispatcher = Dispatcher()
        handler = make_handler(result="pong")
        dispatcher.register(PingCommand, handler)
        command = PingCommand(value=1)

        # Act
        result = await dispatcher.dispatch(command)

        # Assert
        assert result == "pong"
        handler.handle.assert_awaited_once_with(command)

    @pytest.mark.asyncio
    async def test_dispatch_unknown_type_fails_without_calling_handlers(self):
        # Arrange
        dispatcher = Dispatcher()
        handler = make_handler()
        dispatcher.register(PingCommand, handler)

        # Act & Assert
        with pytest.raises(HandlerNotFoundError):
            await dispatcher.dispatch(PingQuery())
        handler.handle.assert_not_called()

    @pytest.mark.asyncio
    async def test_dispatch_does_not_match_subclass_to_parent_handler(self):
        """Test: Lookup is by exact type."""
        dispatcher = Dispatcher()
        dispatcher.register(PingCommand, make_handler())

        with pytest.raises(HandlerNotFoundError):
            await dispatcher.dispatch(LoudPingCommand(value=1))

    @pytest.mark.asyncio
    async def test_dispatch_propagates_handler_errors(self):
        dispatcher = Dispatcher()
        handler = make_handler()
        handler.handle.side_effect = RuntimeError("boom")
        dispatcher.register(PingCommand, handler)

        with pytest.raises(RuntimeError):
            await dispatcher.dispatch(PingCommand(value=1))
