"""Base AggregateRoot class for the domain model."""

from .domain_event import DomainEvent
from .entity import Entity, EntityId


class AggregateRoot(Entity):
    """Entity that owns a consistency boundary and records domain events.

    Events are collected on the aggregate and published by the handler only
    after the unit of work has committed.

    Example:
        >>> post = Post.create_post(author_id=1, image_id="abc", content=None)
        >>> await uow.posts.save(post)
        >>> await uow.commit()
        >>> post.record_created()
        >>> await event_bus.publish_all(post.pull_domain_events())
    """

    def __init__(self, id: EntityId | None = None) -> None:
        super().__init__(id)
        self._domain_events: list[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def get_domain_events(self) -> list[DomainEvent]:
        """Get a copy of the pending events."""
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events and clear them, so each is published once."""
        events = self.get_domain_events()
        self.clear_domain_events()
        return events

    @property
    def has_domain_events(self) -> bool:
        return len(self._domain_events) > 0
