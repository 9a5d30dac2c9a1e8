"""Data Transfer Objects for the users context."""

from .user_dto import AvatarDTO, ProfileDTO

__all__ = ["ProfileDTO", "AvatarDTO"]
