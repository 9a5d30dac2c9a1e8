"""Token pair DTO."""

from dataclasses import dataclass, field


@dataclass
class TokenPairDTO:
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    token_type: str = "bearer"
