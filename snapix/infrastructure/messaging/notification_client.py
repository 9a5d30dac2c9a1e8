"""CeleryNotificationClient - NotificationClient over Celery ``send_task``."""

import asyncio
from typing import Any

from celery import Celery

from snapix.config.logging import get_logger
from snapix.domain.notifications.ports import NotificationClient, RoutingKey

logger = get_logger(__name__)


class CeleryNotificationClient(NotificationClient):
    """Emit notifications as Celery tasks named after the routing key.

    ``send_task`` blocks on the broker connection, so it runs in a worker
    thread. Broker failures are logged and swallowed: callers get
    fire-and-forget semantics.

    Example:
        >>> client = CeleryNotificationClient(create_celery_app(settings))
        >>> await client.emit(RoutingKey("email-notification", "confirmation"),
        ...                   {"email": "neo@zion.io", "code": "3f2b..."})
        # → task "email-notification.confirmation" with kwargs email, code
    """

    def __init__(self, celery_app: Celery) -> None:
        self._celery_app = celery_app

    async def emit(self, routing_key: RoutingKey, payload: dict[str, Any]) -> None:
        try:
            await asyncio.to_thread(
                self._celery_app.send_task,
                routing_key.name,
                kwargs=payload,
                headers={"routing_key": routing_key.as_dict()},
            )
        except Exception as e:
            logger.error(
                "notification.emit_failed",
                routing_key=routing_key.name,
                error=str(e),
                exc_info=True,
            )
            return

        logger.info("notification.emitted", routing_key=routing_key.name)
