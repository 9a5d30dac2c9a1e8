"""Auth use case handlers."""

from .login_handlers import LoginHandler, RefreshTokensHandler
from .password_recovery_handlers import RequestPasswordRecoveryHandler, SetNewPasswordHandler
from .registration_handlers import ConfirmRegistrationHandler, RegisterUserHandler

__all__ = [
    "RegisterUserHandler",
    "ConfirmRegistrationHandler",
    "RequestPasswordRecoveryHandler",
    "SetNewPasswordHandler",
    "LoginHandler",
    "RefreshTokensHandler",
]
