"""Notifications bounded context: messages emitted to other services."""
