from .file_type import FileType
from .stored_object import StoredObject

__all__ = ["FileType", "StoredObject"]
