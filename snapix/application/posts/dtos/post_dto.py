"""Post DTO."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from snapix.domain.posts.entities import Post


@dataclass
class PostDTO:
    id: int
    image_id: str
    content: Optional[str]
    author_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostDTO":
        return cls(
            id=post.id,
            image_id=post.image_id,
            content=post.content,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
