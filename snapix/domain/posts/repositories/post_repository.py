"""PostRepository Port - persistence interface for the Post aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Post


class PostRepository(ABC):
    """Abstract interface for post persistence."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert or update a post.

        Returns:
            The same entity, with ``id`` assigned on insert.
        """

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        pass

    @abstractmethod
    async def delete_one(self, post_id: int) -> None:
        """Delete exactly one post row by id."""

    @abstractmethod
    async def exists_by_image_id(self, image_id: str) -> bool:
        """True when some post already uses ``image_id``."""
