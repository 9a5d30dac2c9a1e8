"""SQLAlchemyUserRepository - implements the UserRepository port."""

from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from snapix.domain.users.entities import User
from snapix.domain.users.repositories import UserRepository

from ..mappers import UserMapper
from ..models import UserModel
from .base import flush


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository.

    Example:
        >>> async with session_factory() as session:
        ...     repo = SQLAlchemyUserRepository(session)
        ...     await repo.save(User.register(...))
        ...     await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._mapper = UserMapper()

    async def save(self, user: User) -> User:
        if user.id is None:
            # INSERT
            model = self._mapper.to_model(user)
            self._session.add(model)
            await flush(self._session, "user")  # Get ID
            user.id = model.id
        else:
            # UPDATE
            model = await self._session.get(UserModel, user.id)
            if model is None:
                raise ValueError(f"User {user.id} not found")
            self._mapper.update_model(user, model)
            await flush(self._session, "user")
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._get_one(UserModel.email == email)

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._get_one(UserModel.username == username)

    async def get_by_confirmation_code(self, code: str) -> Optional[User]:
        return await self._get_one(UserModel.confirmation_code == code)

    async def get_by_recovery_code(self, code: str) -> Optional[User]:
        return await self._get_one(UserModel.recovery_code == code)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserModel))
        return result.scalar_one()

    async def _get_one(self, condition: Any) -> Optional[User]:
        result = await self._session.execute(select(UserModel).where(condition).limit(1))
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._mapper.to_entity(model)
