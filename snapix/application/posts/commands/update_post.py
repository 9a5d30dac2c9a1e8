"""UpdatePost Command."""

from dataclasses import dataclass
from typing import Optional

from snapix.application.shared import Command


@dataclass(frozen=True)
class UpdatePostCommand(Command):
    post_id: int
    user_id: int
    content: Optional[str]
