"""Notifications: e-mail requests emitted to the notifier service."""

from .notification_service import (
    CONFIRMATION_ROUTING_KEY,
    RECOVERY_ROUTING_KEY,
    NotificationService,
    SendEmailDTO,
)

__all__ = [
    "NotificationService",
    "SendEmailDTO",
    "CONFIRMATION_ROUTING_KEY",
    "RECOVERY_ROUTING_KEY",
]
