"""Auth commands.

Secrets (passwords, codes, tokens) are excluded from ``repr`` so they never
end up in logs or tracebacks.
"""

from dataclasses import dataclass, field

from snapix.application.shared import Command


@dataclass(frozen=True)
class RegisterUserCommand(Command):
    username: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ConfirmRegistrationCommand(Command):
    code: str = field(repr=False)


@dataclass(frozen=True)
class RequestPasswordRecoveryCommand(Command):
    email: str


@dataclass(frozen=True)
class SetNewPasswordCommand(Command):
    recovery_code: str = field(repr=False)
    new_password: str = field(repr=False)


@dataclass(frozen=True)
class LoginCommand(Command):
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class RefreshTokensCommand(Command):
    refresh_token: str = field(repr=False)
