"""Files use case handlers."""

from .delete_file_handlers import DeleteAvatarFileHandler, DeleteFileHandler
from .get_files_handlers import GetAvatarFileHandler, GetImageHandler
from .upload_file_handlers import UploadAvatarFileHandler, UploadPostImageHandler

__all__ = [
    "UploadAvatarFileHandler",
    "UploadPostImageHandler",
    "DeleteAvatarFileHandler",
    "DeleteFileHandler",
    "GetAvatarFileHandler",
    "GetImageHandler",
]
