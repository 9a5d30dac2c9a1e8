"""DeleteAvatarFile Command."""

from dataclasses import dataclass

from snapix.application.shared import Command


@dataclass(frozen=True)
class DeleteAvatarFileCommand(Command):
    """Delete the avatar object and its record.

    Fails with BadRequestError when the owner has no avatar.
    """

    owner_id: str
