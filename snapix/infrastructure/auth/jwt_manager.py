"""JWT Token Management (python-jose, HS256).

Access and refresh tokens are signed with different secrets, so a refresh
token is never accepted where an access token is expected.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt

from snapix.application.auth.ports import TokenService
from snapix.config.settings import Settings

ALGORITHM = "HS256"


class JWTManager(TokenService):
    """Handles JWT token creation and verification.

    Payload: ``{"user_id": <int>, "type": "access" | "refresh", "exp": ...}``.

    Example:
        >>> jwt_manager = JWTManager.from_settings(get_settings())
        >>> token = jwt_manager.create_access_token(7)
        >>> jwt_manager.verify_access_token(token)
        7
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
    ) -> None:
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTManager":
        return cls(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
            access_ttl=settings.access_token_ttl,
            refresh_ttl=settings.refresh_token_ttl,
        )

    def create_access_token(self, user_id: int) -> str:
        return self._encode(user_id, "access", self._access_secret, self._access_ttl)

    def create_refresh_token(self, user_id: int) -> str:
        return self._encode(user_id, "refresh", self._refresh_secret, self._refresh_ttl)

    def verify_access_token(self, token: str) -> Optional[int]:
        return self._decode(token, "access", self._access_secret)

    def verify_refresh_token(self, token: str) -> Optional[int]:
        return self._decode(token, "refresh", self._refresh_secret)

    def _encode(self, user_id: int, token_type: str, secret: str, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        to_encode: dict[str, Any] = {
            "user_id": user_id,
            "type": token_type,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(to_encode, secret, algorithm=ALGORITHM)

    def _decode(self, token: str, token_type: str, secret: str) -> Optional[int]:
        """User id from a valid token of ``token_type``, else None."""
        try:
            payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        except JWTError:
            return None

        if payload.get("type") != token_type:
            return None
        user_id = payload.get("user_id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return None
        return user_id
