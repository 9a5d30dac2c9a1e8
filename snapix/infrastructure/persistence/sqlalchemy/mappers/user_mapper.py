"""UserMapper - converts between the User entity and UserModel.

Keeps the domain layer free of SQLAlchemy.
"""

from snapix.domain.users.entities import User

from ..models import UserModel

_FIELDS = (
    "email",
    "username",
    "password_hash",
    "is_confirmed",
    "confirmation_code",
    "confirmation_code_expires_at",
    "recovery_code",
    "recovery_code_expires_at",
    "first_name",
    "last_name",
    "date_of_birth",
    "city",
    "country",
    "about_me",
    "created_at",
    "updated_at",
)


class UserMapper:
    """Mapper for User entity ↔ UserModel ORM.

    Example:
        >>> mapper = UserMapper()
        >>> model = mapper.to_model(User.register(...))
        >>> session.add(model)
        >>> user = mapper.to_entity(await session.get(UserModel, 7))
    """

    def to_entity(self, model: UserModel) -> User:
        return User(id=model.id, **{name: getattr(model, name) for name in _FIELDS})

    def to_model(self, entity: User) -> UserModel:
        return UserModel(id=entity.id, **{name: getattr(entity, name) for name in _FIELDS})

    def update_model(self, entity: User, model: UserModel) -> None:
        """Copy entity state onto an existing (loaded) model in place."""
        for name in _FIELDS:
            setattr(model, name, getattr(entity, name))
