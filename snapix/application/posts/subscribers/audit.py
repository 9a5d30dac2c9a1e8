"""Audit trail for post events."""

from snapix.config.logging import get_logger
from snapix.domain.posts.events import PostCreatedEvent
from snapix.infrastructure.messaging import EventBus

logger = get_logger("snapix.audit")


async def write_post_created_audit_entry(event: PostCreatedEvent) -> None:
    post = event.post
    logger.info(
        "audit.post_created",
        event_id=str(event.event_id),
        post_id=post.id,
        author_id=post.author_id,
        image_id=post.image_id,
        occurred_at=event.occurred_at.isoformat(),
    )


def register_post_subscribers(event_bus: EventBus) -> None:
    event_bus.subscribe(PostCreatedEvent, write_post_created_audit_entry)
