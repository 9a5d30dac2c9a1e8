"""Auth commands."""

from .auth_commands import (
    ConfirmRegistrationCommand,
    LoginCommand,
    RefreshTokensCommand,
    RegisterUserCommand,
    RequestPasswordRecoveryCommand,
    SetNewPasswordCommand,
)

__all__ = [
    "RegisterUserCommand",
    "ConfirmRegistrationCommand",
    "RequestPasswordRecoveryCommand",
    "SetNewPasswordCommand",
    "LoginCommand",
    "RefreshTokensCommand",
]
