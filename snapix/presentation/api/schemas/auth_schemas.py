"""Pydantic schemas for the auth API."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegistrationRequest(BaseModel):
    """Sign-up form.

    Example:
        {"username": "neo_1999", "email": "neo@zion.io", "password": "red-pill-42"}
    """

    username: str = Field(..., min_length=6, max_length=30, pattern=r"^[a-zA-Z0-9_-]+$")
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=20)


class ConfirmRegistrationRequest(BaseModel):
    code: str = Field(..., min_length=1)


class PasswordRecoveryRequest(BaseModel):
    email: EmailStr


class NewPasswordRequest(BaseModel):
    recovery_code: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=20)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class TokenPairResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
