"""Posts queries (read operations)."""

from .get_post import GetPostQuery

__all__ = ["GetPostQuery"]
