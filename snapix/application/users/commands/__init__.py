"""Users commands (write operations)."""

from .avatar import DeleteAvatarCommand, UploadAvatarCommand
from .fill_out_profile import FillOutProfileCommand

__all__ = ["FillOutProfileCommand", "UploadAvatarCommand", "DeleteAvatarCommand"]
