"""Data Transfer Objects for the files context."""

from .file_dto import FileDTO, FilesViewDTO

__all__ = ["FileDTO", "FilesViewDTO"]
