"""Posts commands (write operations)."""

from .create_post import CreatePostCommand
from .delete_post import DeletePostCommand
from .update_post import UpdatePostCommand

__all__ = ["CreatePostCommand", "UpdatePostCommand", "DeletePostCommand"]
