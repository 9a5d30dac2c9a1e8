"""Base Command class for the CQRS pattern.

Command - request to change system state (write operation).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Base class for all commands.

    - **Immutable**: frozen=True
    - **Verb-based naming**: CreatePost, DeleteAvatar
    - **No business logic**: data only, logic lives in the handler
    - **Uniquely typed**: the dispatcher routes by the concrete class

    Example:
        >>> @dataclass(frozen=True)
        ... class CreatePostCommand(Command):
        ...     user_id: int
        ...     content: str | None
        ...     image_id: str

        >>> post = await dispatcher.dispatch(CreatePostCommand(1, None, "abc"))
    """
