from .post_repository import PostRepository

__all__ = ["PostRepository"]
