"""DeletePost Command."""

from dataclasses import dataclass

from snapix.application.shared import Command


@dataclass(frozen=True)
class DeletePostCommand(Command):
    """Delete a post and its image. Only the author may do this."""

    post_id: int
    user_id: int
