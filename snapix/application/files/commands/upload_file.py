"""Upload commands - store an image and record it."""

from dataclasses import dataclass, field

from snapix.application.shared import Command


@dataclass(frozen=True)
class UploadAvatarFileCommand(Command):
    """Store a new avatar for ``owner_id``, replacing the current one."""

    owner_id: str
    content: bytes = field(repr=False)
    mimetype: str
    original_name: str


@dataclass(frozen=True)
class UploadPostImageCommand(Command):
    """Store an image that a post will reference by the returned id."""

    owner_id: str
    content: bytes = field(repr=False)
    mimetype: str
    original_name: str
