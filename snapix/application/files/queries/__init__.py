"""Files queries (read operations)."""

from .get_files import GetAvatarFileQuery, GetImageQuery

__all__ = ["GetAvatarFileQuery", "GetImageQuery"]
