"""Domain exceptions.

The error taxonomy shared by every context. The presentation layer maps each
class to an HTTP status; handlers raise them and never build HTTP responses.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors.

    Example:
        >>> raise NotFoundError("Post not found", post_id=7)
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (user_id, post_id, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(DomainException):
    """Malformed input that slipped past transport validation."""


class BadRequestError(DomainException):
    """Request is well-formed but cannot be applied (e.g. no avatar to delete)."""


class UnauthorizedError(DomainException):
    """Credentials or token are missing, wrong or expired."""


class ForbiddenError(DomainException):
    """Caller is authenticated but does not own the resource."""


class NotFoundError(DomainException):
    """Referenced resource is absent.

    Example:
        >>> image = await facade.get_image(command.image_id)
        >>> if not image.files:
        ...     raise NotFoundError("Image not found", image_id=command.image_id)
    """


class UpstreamError(DomainException):
    """Database, storage or queue failure. Not retried by this layer."""
