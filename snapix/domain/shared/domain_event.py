"""Base DomainEvent class for the in-process event channel."""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    Events are immutable, named in the past tense and carry a routing ``name``
    (e.g. ``"post.create"``) used in logs and by subscribers.

    Example:
        >>> @dataclass(frozen=True)
        ... class PostCreatedEvent(DomainEvent):
        ...     name: ClassVar[str] = "post.create"
        ...     post: Post

        >>> event_bus.subscribe(PostCreatedEvent, write_audit_entry)
    """

    name: ClassVar[str] = "domain.event"

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Unique event id (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """When the event happened (UTC, auto-generated)."""

    @property
    def event_name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.event_name}(name={self.name}, event_id={self.event_id})"
