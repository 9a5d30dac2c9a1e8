"""Users use case handlers."""

from .avatar_handlers import DeleteAvatarHandler, GetAvatarHandler, UploadAvatarHandler
from .profile_handlers import (
    CountRegisteredUsersHandler,
    FillOutProfileHandler,
    GetProfileInfoHandler,
)

__all__ = [
    "CountRegisteredUsersHandler",
    "GetProfileInfoHandler",
    "FillOutProfileHandler",
    "GetAvatarHandler",
    "UploadAvatarHandler",
    "DeleteAvatarHandler",
]
