"""Pydantic schemas for the users API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UpdateProfileRequest(BaseModel):
    """Full replacement of the profile fields.

    Example:
        {
            "first_name": "Trinity",
            "last_name": "Moss",
            "date_of_birth": "1999-03-31",
            "city": "Zion",
            "country": "Earth",
            "about_me": "Follow the white rabbit"
        }
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=50)
    last_name: str | None = Field(default=None, min_length=1, max_length=50)
    date_of_birth: date | None = None
    city: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)
    about_me: str | None = Field(default=None, max_length=200)

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return v


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    date_of_birth: date | None
    city: str | None
    country: str | None
    about_me: str | None
    created_at: datetime
    updated_at: datetime


class AvatarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    url: str
    size: int
    mimetype: str
    created_at: datetime
