"""Base Entity class for the domain model."""

from abc import ABC

EntityId = int | str


class Entity(ABC):
    """Base class for all domain entities.

    Entities compare by identity, not by attributes. Two entities without an
    id (not yet persisted) are equal only if they are the same object.

    Example:
        >>> Post(id=1, ...) == Post(id=1, ...)
        True
    """

    def __init__(self, id: EntityId | None = None) -> None:
        self._id = id

    @property
    def id(self) -> EntityId | None:
        return self._id

    @id.setter
    def id(self, value: EntityId) -> None:
        """Assign the id generated by the store on first save."""
        self._id = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False

        if self._id is None and other._id is None:
            return self is other

        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return hash(id(self))
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
