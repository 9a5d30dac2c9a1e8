"""Shared Kernel - building blocks for every bounded context.

- Entity: object with identity
- AggregateRoot: consistency boundary that records domain events
- DomainEvent: something that happened
- DomainException: base of the error taxonomy
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity
from .exceptions import (
    BadRequestError,
    DomainException,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    # Base classes
    "Entity",
    "AggregateRoot",
    "DomainEvent",
    # Exceptions
    "DomainException",
    "ValidationError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "UpstreamError",
]
