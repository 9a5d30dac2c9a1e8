"""NotificationService - typed e-mail notifications over the message bus."""

from dataclasses import asdict, dataclass

from snapix.domain.notifications.ports import NotificationClient, RoutingKey

CONFIRMATION_ROUTING_KEY = RoutingKey(cmd="email-notification", type="confirmation")
RECOVERY_ROUTING_KEY = RoutingKey(cmd="email-notification", type="recovery")


@dataclass(frozen=True)
class SendEmailDTO:
    """Payload consumed by the notifier: where to send and which code."""

    email: str
    code: str


class NotificationService:
    """Emit e-mail notification requests.

    Fire-and-forget: both methods return once the message is handed to the
    client, and never raise on transport failure.

    Example:
        >>> await notifications.send_email_confirmation_code(
        ...     SendEmailDTO(email="neo@zion.io", code=user.confirmation_code)
        ... )
    """

    def __init__(self, client: NotificationClient) -> None:
        self._client = client

    async def send_email_confirmation_code(self, dto: SendEmailDTO) -> None:
        await self._client.emit(CONFIRMATION_ROUTING_KEY, asdict(dto))

    async def send_recovery_password_temp_code(self, dto: SendEmailDTO) -> None:
        await self._client.emit(RECOVERY_ROUTING_KEY, asdict(dto))
