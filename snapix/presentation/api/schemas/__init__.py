"""Pydantic schemas for API requests/responses."""

from .auth_schemas import (
    ConfirmRegistrationRequest,
    LoginRequest,
    NewPasswordRequest,
    PasswordRecoveryRequest,
    RefreshTokenRequest,
    RegistrationRequest,
    TokenPairResponse,
)
from .common import ErrorResponse
from .file_schemas import FileResponse
from .post_schemas import CreatePostRequest, PostResponse, UpdatePostRequest
from .user_schemas import AvatarResponse, ProfileResponse, UpdateProfileRequest

__all__ = [
    "ErrorResponse",
    "FileResponse",
    "UpdateProfileRequest",
    "ProfileResponse",
    "AvatarResponse",
    "CreatePostRequest",
    "UpdatePostRequest",
    "PostResponse",
    "RegistrationRequest",
    "ConfirmRegistrationRequest",
    "PasswordRecoveryRequest",
    "NewPasswordRequest",
    "LoginRequest",
    "RefreshTokenRequest",
    "TokenPairResponse",
]
