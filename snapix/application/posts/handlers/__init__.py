"""Posts use case handlers."""

from .create_post_handler import CreatePostHandler
from .manage_post_handlers import DeletePostHandler, GetPostHandler, UpdatePostHandler

__all__ = ["CreatePostHandler", "GetPostHandler", "UpdatePostHandler", "DeletePostHandler"]
