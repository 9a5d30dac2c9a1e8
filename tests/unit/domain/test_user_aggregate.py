"""Unit tests for the User aggregate.

Pure domain logic: no database, no mocks.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from snapix.domain.shared import BadRequestError
from snapix.domain.users.entities import User
from snapix.domain.users.entities.user import CONFIRMATION_CODE_TTL, RECOVERY_CODE_TTL


class TestUserRegistration:
    """Tests for User.register."""

    def test_register_creates_unconfirmed_user_with_code(self, sample_user_data):
        """Test: A new user is unconfirmed and holds a 24h confirmation code."""
        # Arrange
        before = datetime.now(timezone.utc)

        # Act
        user = User.register(**sample_user_data)

        # Assert
        assert user.id is None  # Not saved yet
        assert user.is_confirmed is False
        assert user.confirmation_code
        assert user.confirmation_code_expires_at >= before + CONFIRMATION_CODE_TTL

    def test_register_issues_distinct_codes(self, sample_user_data):
        """Test: Every registration gets its own code."""
        first = User.register(**sample_user_data)
        second = User.register(**sample_user_data)

        assert first.confirmation_code != second.confirmation_code


class TestUserConfirmation:
    """Tests for User.confirm."""

    def test_confirm_with_valid_code(self, sample_user_data):
        """Test: The right code confirms and is consumed."""
        # Arrange
        user = User.register(**sample_user_data)

        # Act
        user.confirm(user.confirmation_code)

        # Assert
        assert user.is_confirmed is True
        assert user.confirmation_code is None
        assert user.confirmation_code_expires_at is None

    def test_confirm_with_wrong_code_fails(self, sample_user_data):
        """Test: A wrong code is rejected."""
        user = User.register(**sample_user_data)

        with pytest.raises(BadRequestError):
            user.confirm("not-the-code")

        assert user.is_confirmed is False

    def test_confirm_with_expired_code_fails(self, sample_user_data):
        """Test: An expired code is rejected."""
        # Arrange
        user = User.register(**sample_user_data)
        user.confirmation_code_expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)

        # Act & Assert
        with pytest.raises(BadRequestError):
            user.confirm(user.confirmation_code)

    def test_confirm_accepts_naive_expiry(self, sample_user_data):
        """Test: Naive datetimes (as SQLite returns them) are read as UTC."""
        # Arrange
        user = User.register(**sample_user_data)
        user.confirmation_code_expires_at = (
            datetime.now(timezone.utc) + timedelta(hours=1)
        ).replace(tzinfo=None)

        # Act
        user.confirm(user.confirmation_code)

        # Assert
        assert user.is_confirmed is True

    def test_confirm_twice_fails(self, sample_user_data):
        """Test: An already confirmed user cannot confirm again."""
        user = User.register(**sample_user_data)
        code = user.confirmation_code
        user.confirm(code)

        with pytest.raises(BadRequestError):
            user.confirm(code)


class TestPasswordRecovery:
    """Tests for the recovery code flow."""

    def test_start_password_recovery_issues_code(self, sample_user_data):
        """Test: Recovery issues a 1h code."""
        # Arrange
        user = User(**sample_user_data, is_confirmed=True)
        before = datetime.now(timezone.utc)

        # Act
        code = user.start_password_recovery()

        # Assert
        assert code == user.recovery_code
        assert user.recovery_code_expires_at >= before + RECOVERY_CODE_TTL

    def test_reset_password_with_valid_code(self, sample_user_data):
        """Test: A valid code replaces the hash and is consumed."""
        # Arrange
        user = User(**sample_user_data, is_confirmed=True)
        code = user.start_password_recovery()

        # Act
        user.reset_password(code, "$2b$12$new")

        # Assert
        assert user.password_hash == "$2b$12$new"
        assert user.recovery_code is None

    def test_reset_password_with_wrong_code_fails(self, sample_user_data):
        """Test: A wrong code leaves the password unchanged."""
        user = User(**sample_user_data, is_confirmed=True)
        user.start_password_recovery()

        with pytest.raises(BadRequestError):
            user.reset_password("wrong", "$2b$12$new")

        assert user.password_hash == sample_user_data["password_hash"]

    def test_reset_password_with_expired_code_fails(self, sample_user_data):
        """Test: An expired recovery code is rejected."""
        user = User(**sample_user_data, is_confirmed=True)
        code = user.start_password_recovery()
        user.recovery_code_expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)

        with pytest.raises(BadRequestError):
            user.reset_password(code, "$2b$12$new")


class TestProfile:
    """Tests for fill_out_profile."""

    def test_fill_out_profile_replaces_all_fields(self, sample_user_data):
        """Test: Every field is replaced, None clears."""
        # Arrange
        user = User(**sample_user_data, first_name="Old", city="Old City")

        # Act
        user.fill_out_profile(
            first_name="Thomas",
            last_name="Anderson",
            date_of_birth=date(1971, 9, 13),
            city=None,
            country="USA",
            about_me="Programmer",
        )

        # Assert
        assert user.first_name == "Thomas"
        assert user.last_name == "Anderson"
        assert user.date_of_birth == date(1971, 9, 13)
        assert user.city is None
        assert user.country == "USA"
        assert user.about_me == "Programmer"
