"""Post Aggregate Root - a user's image post with optional text."""

from datetime import datetime, timezone
from typing import Optional

from snapix.domain.shared import AggregateRoot, ForbiddenError

from ..events import PostCreatedEvent, PostDeletedEvent


class Post(AggregateRoot):
    """Post Aggregate Root.

    Rules:
    - A post always references exactly one stored image
    - Only the author may edit or delete it
    - ``post.create`` is recorded after the first save, once the id exists
    """

    def __init__(
        self,
        author_id: int,
        image_id: str,
        content: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[int] = None,
    ) -> None:
        super().__init__(id)

        self.author_id = author_id
        self.image_id = image_id
        self.content = content

        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    @classmethod
    def create_post(
        cls,
        author_id: int,
        image_id: str,
        content: Optional[str] = None,
    ) -> "Post":
        return cls(author_id=author_id, image_id=image_id, content=content)

    def record_created(self) -> None:
        """Record ``post.create`` carrying this (persisted) post."""
        self.add_domain_event(PostCreatedEvent(post=self))

    def ensure_author(self, user_id: int) -> None:
        """Raises ForbiddenError unless ``user_id`` wrote this post."""
        if self.author_id != user_id:
            raise ForbiddenError("Post belongs to another user", post_id=self.id)

    def edit(self, content: Optional[str]) -> None:
        self.content = content
        self.updated_at = datetime.now(timezone.utc)

    def mark_deleted(self) -> None:
        self.add_domain_event(
            PostDeletedEvent(post_id=self.id, author_id=self.author_id, image_id=self.image_id)
        )
