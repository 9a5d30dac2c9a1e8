"""Event Bus - in-process channel for domain events.

Aggregates record events; handlers publish them after commit; subscribers
(audit, notifications) react without the publisher knowing about them.
Delivery is at-most-once: nothing is persisted or retried.
"""

from collections import defaultdict
from typing import Awaitable, Callable, Type

from snapix.config.logging import get_logger
from snapix.domain.shared import DomainEvent

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    """Type-keyed event bus.

    A failing subscriber is logged and skipped; the remaining subscribers and
    the publisher are unaffected.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(PostCreatedEvent, write_post_created_audit_entry)
        >>> await event_bus.publish_all(post.pull_domain_events())
    """

    def __init__(self) -> None:
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        self._subscribers[event_type].append(handler)
        logger.debug(
            "event_bus.subscription_added",
            event_type=event_type.__name__,
            handler=handler.__name__,
        )

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every subscriber of its exact type, in order."""
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug("event_bus.no_subscribers", event_name=event.name)
            return

        logger.info(
            "event_bus.publishing",
            event_name=event.name,
            handlers_count=len(handlers),
            event_id=str(event.event_id),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but continue with other handlers
                logger.error(
                    "event_bus.handler_failed",
                    event_name=event.name,
                    handler=handler.__name__,
                    error=str(e),
                    exc_info=True,
                )

    async def publish_all(self, events: list[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)

    def get_subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._subscribers.get(event_type, []))
