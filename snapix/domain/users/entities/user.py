"""User Aggregate Root - account credentials, confirmation state and profile."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from snapix.domain.shared import AggregateRoot, BadRequestError

CONFIRMATION_CODE_TTL = timedelta(hours=24)
RECOVERY_CODE_TTL = timedelta(hours=1)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _is_expired(expires_at: Optional[datetime], now: datetime) -> bool:
    if expires_at is None:
        return True
    if expires_at.tzinfo is None:
        # SQLite hands naive datetimes back
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= now


class User(AggregateRoot):
    """User Aggregate Root.

    Rules:
    - A user registers unconfirmed and receives a one-time confirmation code
    - Only confirmed users can log in
    - A recovery code is single-use and short-lived
    - Profile fields are free-form and all optional

    Example:
        >>> user = User.register(username="neo", email="neo@zion.io", password_hash=h)
        >>> user.confirm(user.confirmation_code)
        >>> user.is_confirmed
        True
    """

    def __init__(
        self,
        username: str,
        email: str,
        password_hash: str,
        is_confirmed: bool = False,
        confirmation_code: Optional[str] = None,
        confirmation_code_expires_at: Optional[datetime] = None,
        recovery_code: Optional[str] = None,
        recovery_code_expires_at: Optional[datetime] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        about_me: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[int] = None,
    ) -> None:
        super().__init__(id)

        self.username = username
        self.email = email
        self.password_hash = password_hash

        # Confirmation / recovery state
        self.is_confirmed = is_confirmed
        self.confirmation_code = confirmation_code
        self.confirmation_code_expires_at = confirmation_code_expires_at
        self.recovery_code = recovery_code
        self.recovery_code_expires_at = recovery_code_expires_at

        # Profile
        self.first_name = first_name
        self.last_name = last_name
        self.date_of_birth = date_of_birth
        self.city = city
        self.country = country
        self.about_me = about_me

        now = _now()
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    @classmethod
    def register(cls, username: str, email: str, password_hash: str) -> "User":
        """Create an unconfirmed user with a fresh confirmation code."""
        now = _now()
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            is_confirmed=False,
            confirmation_code=uuid4().hex,
            confirmation_code_expires_at=now + CONFIRMATION_CODE_TTL,
            created_at=now,
            updated_at=now,
        )

    def confirm(self, code: str) -> None:
        """Confirm registration with the code sent by e-mail.

        Raises:
            BadRequestError: Already confirmed, wrong or expired code.
        """
        now = _now()
        if self.is_confirmed:
            raise BadRequestError("Email is already confirmed", user_id=self.id)
        if self.confirmation_code != code or _is_expired(
            self.confirmation_code_expires_at, now
        ):
            raise BadRequestError("Confirmation code is invalid or expired")

        self.is_confirmed = True
        self.confirmation_code = None
        self.confirmation_code_expires_at = None
        self.updated_at = now

    def start_password_recovery(self) -> str:
        """Issue a new recovery code, replacing any previous one."""
        now = _now()
        self.recovery_code = uuid4().hex
        self.recovery_code_expires_at = now + RECOVERY_CODE_TTL
        self.updated_at = now
        return self.recovery_code

    def reset_password(self, code: str, password_hash: str) -> None:
        """Set a new password hash using a recovery code.

        Raises:
            BadRequestError: Wrong or expired recovery code.
        """
        now = _now()
        if self.recovery_code != code or _is_expired(self.recovery_code_expires_at, now):
            raise BadRequestError("Recovery code is invalid or expired")

        self.password_hash = password_hash
        self.recovery_code = None
        self.recovery_code_expires_at = None
        self.updated_at = now

    def fill_out_profile(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        date_of_birth: Optional[date],
        city: Optional[str],
        country: Optional[str],
        about_me: Optional[str],
    ) -> None:
        """Replace all profile fields."""
        self.first_name = first_name
        self.last_name = last_name
        self.date_of_birth = date_of_birth
        self.city = city
        self.country = country
        self.about_me = about_me
        self.updated_at = _now()
