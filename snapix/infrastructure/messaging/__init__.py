"""Messaging infrastructure - event bus and the Celery notification client."""

from .celery_app import create_celery_app
from .event_bus import EventBus, EventHandler
from .notification_client import CeleryNotificationClient

__all__ = ["EventBus", "EventHandler", "CeleryNotificationClient", "create_celery_app"]
