from .storage_port import StorageAdapter

__all__ = ["StorageAdapter"]
