"""Object storage adapters."""

from .local_storage_adapter import LocalStorageAdapter

__all__ = ["LocalStorageAdapter"]
