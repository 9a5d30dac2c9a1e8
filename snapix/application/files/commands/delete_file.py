"""DeleteFile Command."""

from dataclasses import dataclass

from snapix.application.shared import Command


@dataclass(frozen=True)
class DeleteFileCommand(Command):
    file_id: str
    owner_id: str
