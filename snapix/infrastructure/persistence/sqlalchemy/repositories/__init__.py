"""SQLAlchemy repository implementations."""

from .file_repository import SQLAlchemyFileRepository
from .post_repository import SQLAlchemyPostRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyPostRepository",
    "SQLAlchemyFileRepository",
]
