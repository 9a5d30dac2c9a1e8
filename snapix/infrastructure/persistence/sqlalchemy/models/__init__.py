"""SQLAlchemy ORM models."""

from .base import Base
from .file_model import FileModel
from .post_model import PostModel
from .user_model import UserModel

__all__ = ["Base", "UserModel", "PostModel", "FileModel"]
