"""API routes."""

from .auth import router as auth_router
from .health import router as health_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = ["auth_router", "health_router", "posts_router", "users_router"]
