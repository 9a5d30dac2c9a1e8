"""Event subscribers for the posts context."""

from .audit import register_post_subscribers, write_post_created_audit_entry

__all__ = ["register_post_subscribers", "write_post_created_audit_entry"]
