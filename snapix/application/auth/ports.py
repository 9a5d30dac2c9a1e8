"""Ports the auth use cases depend on."""

from abc import ABC, abstractmethod
from typing import Optional


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass


class TokenService(ABC):
    """Issue and verify access/refresh tokens.

    Verification returns the user id carried by a valid token of the right
    kind, or None.
    """

    @abstractmethod
    def create_access_token(self, user_id: int) -> str:
        pass

    @abstractmethod
    def create_refresh_token(self, user_id: int) -> str:
        pass

    @abstractmethod
    def verify_access_token(self, token: str) -> Optional[int]:
        pass

    @abstractmethod
    def verify_refresh_token(self, token: str) -> Optional[int]:
        pass
