from .notification_port import NotificationClient, RoutingKey

__all__ = ["NotificationClient", "RoutingKey"]
