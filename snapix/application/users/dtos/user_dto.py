"""User DTOs - profile and avatar views."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from snapix.application.files.dtos import FileDTO
from snapix.domain.users.entities import User


@dataclass
class ProfileDTO:
    """Profile view of a user. Never carries credentials or codes."""

    id: int
    username: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    date_of_birth: Optional[date]
    city: Optional[str]
    country: Optional[str]
    about_me: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "ProfileDTO":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            date_of_birth=user.date_of_birth,
            city=user.city,
            country=user.country,
            about_me=user.about_me,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass
class AvatarDTO:
    id: str
    url: str
    size: int
    mimetype: str
    created_at: datetime

    @classmethod
    def from_file(cls, file: FileDTO) -> "AvatarDTO":
        return cls(
            id=file.id,
            url=file.url,
            size=file.size,
            mimetype=file.mimetype,
            created_at=file.created_at,
        )
