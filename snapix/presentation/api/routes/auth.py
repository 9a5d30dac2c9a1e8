"""Auth API routes - registration, confirmation, password recovery, tokens."""

from fastapi import APIRouter, status

from snapix.application.auth.commands import (
    ConfirmRegistrationCommand,
    LoginCommand,
    RefreshTokensCommand,
    RegisterUserCommand,
    RequestPasswordRecoveryCommand,
    SetNewPasswordCommand,
)
from snapix.presentation.api.dependencies import DispatcherDep
from snapix.presentation.api.schemas import (
    ConfirmRegistrationRequest,
    LoginRequest,
    NewPasswordRequest,
    PasswordRecoveryRequest,
    RefreshTokenRequest,
    RegistrationRequest,
    TokenPairResponse,
)
from snapix.presentation.api.schemas.common import BAD_REQUEST, UNAUTHORIZED

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/registration",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Register",
    description="Creates an unconfirmed account and e-mails a confirmation code.",
    responses={**BAD_REQUEST},
)
async def registration(request: RegistrationRequest, dispatcher: DispatcherDep) -> None:
    await dispatcher.dispatch(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.post(
    "/registration-confirmation",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Confirm registration",
    responses={**BAD_REQUEST},
)
async def registration_confirmation(
    request: ConfirmRegistrationRequest, dispatcher: DispatcherDep
) -> None:
    await dispatcher.dispatch(ConfirmRegistrationCommand(code=request.code))


@router.post(
    "/password-recovery",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Request password recovery",
    description="Always 204, whether or not the e-mail is registered.",
)
async def password_recovery(request: PasswordRecoveryRequest, dispatcher: DispatcherDep) -> None:
    await dispatcher.dispatch(RequestPasswordRecoveryCommand(email=request.email))


@router.post(
    "/new-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Set new password with a recovery code",
    responses={**BAD_REQUEST},
)
async def new_password(request: NewPasswordRequest, dispatcher: DispatcherDep) -> None:
    await dispatcher.dispatch(
        SetNewPasswordCommand(
            recovery_code=request.recovery_code,
            new_password=request.new_password,
        )
    )


@router.post(
    "/login",
    response_model=TokenPairResponse,
    summary="Log in",
    responses={**UNAUTHORIZED},
)
async def login(request: LoginRequest, dispatcher: DispatcherDep) -> TokenPairResponse:
    pair = await dispatcher.dispatch(LoginCommand(email=request.email, password=request.password))
    return TokenPairResponse.model_validate(pair)


@router.post(
    "/refresh-token",
    response_model=TokenPairResponse,
    summary="Exchange a refresh token for a new pair",
    responses={**UNAUTHORIZED},
)
async def refresh_token(request: RefreshTokenRequest, dispatcher: DispatcherDep) -> TokenPairResponse:
    pair = await dispatcher.dispatch(RefreshTokensCommand(refresh_token=request.refresh_token))
    return TokenPairResponse.model_validate(pair)
