"""Dependency injection for FastAPI.

Provides dependencies for API routes:
- The dispatcher (every route talks to handlers only through it)
- Token verification and the authenticated user id
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from snapix.application.auth.ports import TokenService
from snapix.application.shared import Dispatcher
from snapix.bootstrap import Container

# ============================================================================
# GLOBAL DEPENDENCIES (initialized in the app lifespan)
# ============================================================================

_container: Container | None = None


def init_dependencies(container: Container) -> None:
    """Install the container built at startup.

    Note:
        Called from the FastAPI lifespan in main.py.
    """
    global _container
    _container = container


def reset_dependencies() -> None:
    global _container
    _container = None


def get_container() -> Container:
    if _container is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _container


def get_dispatcher() -> Dispatcher:
    return get_container().dispatcher


def get_token_service() -> TokenService:
    return get_container().tokens


# ============================================================================
# AUTHENTICATION
# ============================================================================


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> int:
    """Get the current user id from ``Authorization: Bearer <access JWT>``.

    Raises:
        HTTPException: 401 if the header is missing, malformed, or the token
            is not a valid access token.
    """
    if authorization is None:
        raise _unauthorized("Missing authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise _unauthorized("Invalid authorization header")

    user_id = tokens.verify_access_token(token.strip())
    if user_id is None:
        raise _unauthorized("Invalid or expired access token")
    return user_id


# ============================================================================
# TYPE ALIASES (for cleaner route signatures)
# ============================================================================

CurrentUserId = Annotated[int, Depends(get_current_user_id)]
DispatcherDep = Annotated[Dispatcher, Depends(get_dispatcher)]
