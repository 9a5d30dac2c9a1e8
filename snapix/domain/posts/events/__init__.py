from .post_events import PostCreatedEvent, PostDeletedEvent

__all__ = ["PostCreatedEvent", "PostDeletedEvent"]
