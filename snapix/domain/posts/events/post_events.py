"""Domain Events for the Post lifecycle."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from snapix.domain.shared import DomainEvent

if TYPE_CHECKING:
    from ..entities import Post


@dataclass(frozen=True)
class PostCreatedEvent(DomainEvent):
    """Event: post persisted.

    Carries the persisted entity itself, so subscribers see the generated id
    and timestamps.
    """

    name: ClassVar[str] = "post.create"

    post: "Post"


@dataclass(frozen=True)
class PostDeletedEvent(DomainEvent):
    """Event: post row removed (its image already deleted)."""

    name: ClassVar[str] = "post.delete"

    post_id: Any
    author_id: int
    image_id: str
