"""UserRepository Port - persistence interface for the User aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import User


class UserRepository(ABC):
    """Abstract interface for user persistence.

    Lookups return ``None`` when nothing matches.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one.

        Returns:
            The same entity, with ``id`` assigned on insert.
        """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_confirmation_code(self, code: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_recovery_code(self, code: str) -> Optional[User]:
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
