"""FillOutProfile Command."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from snapix.application.shared import Command


@dataclass(frozen=True)
class FillOutProfileCommand(Command):
    """Replace the caller's profile fields.

    Fields left as None are cleared, not kept.
    """

    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    city: Optional[str] = None
    country: Optional[str] = None
    about_me: Optional[str] = None
