"""Unit of Work port - transaction boundary for one use case."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import TYPE_CHECKING, Callable, Optional, Type

if TYPE_CHECKING:
    from snapix.domain.files.repositories import FileRepository
    from snapix.domain.posts.repositories import PostRepository
    from snapix.domain.users.repositories import UserRepository


class UnitOfWork(ABC):
    """Abstract Unit of Work.

    Example:
        >>> async with uow_factory() as uow:
        ...     user = await uow.users.get_by_id(7)
        ...     user.fill_out_profile(...)
        ...     await uow.users.save(user)
        ...     await uow.commit()

    Leaving the block with an exception rolls back. Leaving it without
    ``commit()`` discards the changes.
    """

    users: "UserRepository"
    posts: "PostRepository"
    files: "FileRepository"

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit transaction.

        Raises:
            UpstreamError: If the store rejects the commit.
        """

    @abstractmethod
    async def rollback(self) -> None:
        pass


UnitOfWorkFactory = Callable[[], UnitOfWork]
