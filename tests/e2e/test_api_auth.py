"""E2E tests for the auth API."""

from snapix.application.auth.commands import (
    ConfirmRegistrationCommand,
    LoginCommand,
    RefreshTokensCommand,
    RegisterUserCommand,
    RequestPasswordRecoveryCommand,
    SetNewPasswordCommand,
)
from snapix.application.auth.dtos import TokenPairDTO
from snapix.domain.shared import BadRequestError, UnauthorizedError


def sent_message(dispatcher):
    dispatcher.dispatch.assert_awaited_once()
    return dispatcher.dispatch.await_args.args[0]


class TestRegistration:
    """Tests for registration and confirmation."""

    def test_registration(self, client, dispatcher):
        response = client.post(
            "/auth/registration",
            json={"username": "neo_1999", "email": "neo@zion.io", "password": "secret1"},
        )

        assert response.status_code == 204
        assert sent_message(dispatcher) == RegisterUserCommand(
            username="neo_1999", email="neo@zion.io", password="secret1"
        )

    def test_registration_validation(self, client, dispatcher):
        """Test: Short username, bad e-mail and short password are all rejected."""
        response = client.post(
            "/auth/registration",
            json={"username": "neo", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 422
        fields = {tuple(d["loc"])[-1] for d in response.json()["details"]}
        assert fields == {"username", "email", "password"}
        dispatcher.dispatch.assert_not_called()

    def test_registration_taken_email(self, client, dispatcher):
        dispatcher.dispatch.side_effect = BadRequestError("User with this email is already registered")

        response = client.post(
            "/auth/registration",
            json={"username": "neo_1999", "email": "neo@zion.io", "password": "secret1"},
        )

        assert response.status_code == 400

    def test_registration_confirmation(self, client, dispatcher):
        response = client.post("/auth/registration-confirmation", json={"code": "c0de"})

        assert response.status_code == 204
        assert sent_message(dispatcher) == ConfirmRegistrationCommand(code="c0de")


class TestPasswordRecovery:
    def test_password_recovery(self, client, dispatcher):
        response = client.post("/auth/password-recovery", json={"email": "neo@zion.io"})

        assert response.status_code == 204
        assert sent_message(dispatcher) == RequestPasswordRecoveryCommand(email="neo@zion.io")

    def test_new_password(self, client, dispatcher):
        response = client.post(
            "/auth/new-password", json={"recovery_code": "r3c", "new_password": "better1"}
        )

        assert response.status_code == 204
        assert sent_message(dispatcher) == SetNewPasswordCommand(recovery_code="r3c", new_password="better1")


class TestTokens:
    """Tests for login and refresh."""

    def test_login(self, client, dispatcher):
        dispatcher.dispatch.return_value = TokenPairDTO(access_token="a", refresh_token="r")

        response = client.post("/auth/login", json={"email": "neo@zion.io", "password": "secret1"})

        assert response.status_code == 200
        assert response.json() == {"access_token": "a", "refresh_token": "r", "token_type": "bearer"}
        assert sent_message(dispatcher) == LoginCommand(email="neo@zion.io", password="secret1")

    def test_login_wrong_credentials(self, client, dispatcher):
        """Test: UnauthorizedError → 401 with WWW-Authenticate."""
        dispatcher.dispatch.side_effect = UnauthorizedError("Invalid email or password")

        response = client.post("/auth/login", json={"email": "neo@zion.io", "password": "nope12"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {"error": "UnauthorizedError", "message": "Invalid email or password"}

    def test_refresh_token(self, client, dispatcher):
        dispatcher.dispatch.return_value = TokenPairDTO(access_token="a2", refresh_token="r2")

        response = client.post("/auth/refresh-token", json={"refresh_token": "r"})

        assert response.status_code == 200
        assert response.json()["access_token"] == "a2"
        assert sent_message(dispatcher) == RefreshTokensCommand(refresh_token="r")
