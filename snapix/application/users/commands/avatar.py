"""Avatar commands."""

from dataclasses import dataclass, field

from snapix.application.shared import Command


@dataclass(frozen=True)
class UploadAvatarCommand(Command):
    """Upload a new avatar (any previous one is deleted first).

    ``owner_id`` is the user id as a string, the form file records use.
    """

    owner_id: str
    content: bytes = field(repr=False)
    mimetype: str
    original_name: str


@dataclass(frozen=True)
class DeleteAvatarCommand(Command):
    user_id: int
