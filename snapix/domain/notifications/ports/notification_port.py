"""NotificationClient Port - fire-and-forget emission onto the message bus."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RoutingKey:
    """Structured routing tag: command name plus subtype.

    Example:
        >>> RoutingKey(cmd="email-notification", type="recovery").name
        'email-notification.recovery'
    """

    cmd: str
    type: str

    @property
    def name(self) -> str:
        return f"{self.cmd}.{self.type}"

    def as_dict(self) -> dict[str, str]:
        return {"cmd": self.cmd, "type": self.type}


class NotificationClient(ABC):
    """Abstract message bus client.

    ``emit`` returns once the message is handed to the transport. There is no
    acknowledgement and no delivery guarantee surfaced to the caller, and
    transport failures are not raised.
    """

    @abstractmethod
    async def emit(self, routing_key: RoutingKey, payload: dict[str, Any]) -> None:
        pass
