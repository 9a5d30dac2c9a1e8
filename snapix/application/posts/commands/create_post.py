"""CreatePost Command."""

from dataclasses import dataclass
from typing import Optional

from snapix.application.shared import Command


@dataclass(frozen=True)
class CreatePostCommand(Command):
    """Create a post around an already uploaded image.

    Attributes:
        user_id: Author.
        content: Optional text.
        image_id: Id returned by ``POST /posts/image``.

    Example:
        >>> command = CreatePostCommand(user_id=7, content="hello", image_id="3f2b...")
        >>> post = await dispatcher.dispatch(command)
    """

    user_id: int
    content: Optional[str]
    image_id: str
