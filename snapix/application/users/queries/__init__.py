"""Users queries (read operations)."""

from .users_queries import CountRegisteredUsersQuery, GetAvatarQuery, GetProfileInfoQuery

__all__ = ["CountRegisteredUsersQuery", "GetProfileInfoQuery", "GetAvatarQuery"]
