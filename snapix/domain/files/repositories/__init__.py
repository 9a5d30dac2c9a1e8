from .file_repository import FileRepository

__all__ = ["FileRepository"]
