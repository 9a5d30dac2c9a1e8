"""SQLAlchemy persistence layer."""

from .database import create_engine, create_session_factory
from .models import Base, FileModel, PostModel, UserModel
from .repositories import (
    SQLAlchemyFileRepository,
    SQLAlchemyPostRepository,
    SQLAlchemyUserRepository,
)
from .unit_of_work import SQLAlchemyUnitOfWork, create_unit_of_work

__all__ = [
    # ORM Models
    "Base",
    "UserModel",
    "PostModel",
    "FileModel",
    # Repositories
    "SQLAlchemyUserRepository",
    "SQLAlchemyPostRepository",
    "SQLAlchemyFileRepository",
    # Unit of Work
    "SQLAlchemyUnitOfWork",
    "create_unit_of_work",
    # Engine
    "create_engine",
    "create_session_factory",
]
