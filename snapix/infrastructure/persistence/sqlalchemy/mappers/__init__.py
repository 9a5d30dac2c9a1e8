"""Entity ↔ ORM model mappers."""

from .file_mapper import FileMapper
from .post_mapper import PostMapper
from .user_mapper import UserMapper

__all__ = ["UserMapper", "PostMapper", "FileMapper"]
