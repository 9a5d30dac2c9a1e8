"""Data Transfer Objects for the posts context."""

from .post_dto import PostDTO

__all__ = ["PostDTO"]
