"""Users queries."""

from dataclasses import dataclass

from snapix.application.shared import Query


@dataclass(frozen=True)
class CountRegisteredUsersQuery(Query):
    """Number of registered users (confirmed or not)."""


@dataclass(frozen=True)
class GetProfileInfoQuery(Query):
    user_id: int


@dataclass(frozen=True)
class GetAvatarQuery(Query):
    user_id: int
