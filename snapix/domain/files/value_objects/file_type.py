"""File kinds kept by the storage context."""

from enum import Enum


class FileType(str, Enum):
    AVATAR = "avatar"
    POST_IMAGE = "post-image"
