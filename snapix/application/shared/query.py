"""Base Query class for the CQRS pattern.

Query - request to read data. Queries have no side effects.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class for all queries.

    Example:
        >>> @dataclass(frozen=True)
        ... class GetAvatarQuery(Query):
        ...     user_id: int

        >>> avatar = await dispatcher.dispatch(GetAvatarQuery(user_id=7))
    """
