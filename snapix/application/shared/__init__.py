"""Shared Application Layer components."""

from .command import Command
from .dispatcher import (
    DispatchError,
    Dispatcher,
    DuplicateHandlerError,
    HandlerNotFoundError,
)
from .handler import CommandHandler, QueryHandler
from .query import Query
from .unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Command",
    "Query",
    "CommandHandler",
    "QueryHandler",
    "Dispatcher",
    "DispatchError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
