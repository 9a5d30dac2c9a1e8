"""Files commands (write operations)."""

from .delete_avatar_file import DeleteAvatarFileCommand
from .delete_file import DeleteFileCommand
from .upload_file import UploadAvatarFileCommand, UploadPostImageCommand

__all__ = [
    "UploadAvatarFileCommand",
    "UploadPostImageCommand",
    "DeleteAvatarFileCommand",
    "DeleteFileCommand",
]
