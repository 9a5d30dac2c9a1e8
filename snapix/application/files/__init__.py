"""Files use cases and the facade other contexts use to reach them."""

from .facade import ImageFilesFacade

__all__ = ["ImageFilesFacade"]
