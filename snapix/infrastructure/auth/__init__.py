"""Auth infrastructure - JWT tokens and password hashing."""

from .jwt_manager import JWTManager
from .password_hasher import BcryptPasswordHasher

__all__ = ["JWTManager", "BcryptPasswordHasher"]
