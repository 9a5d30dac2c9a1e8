"""Users API routes - profile, avatar and registration statistics."""

from typing import Annotated

from fastapi import APIRouter, File, UploadFile, status

from snapix.application.users.commands import (
    DeleteAvatarCommand,
    FillOutProfileCommand,
    UploadAvatarCommand,
)
from snapix.application.users.queries import (
    CountRegisteredUsersQuery,
    GetAvatarQuery,
    GetProfileInfoQuery,
)
from snapix.presentation.api.dependencies import CurrentUserId, DispatcherDep
from snapix.presentation.api.schemas import AvatarResponse, ProfileResponse, UpdateProfileRequest
from snapix.presentation.api.schemas.common import BAD_REQUEST, NOT_FOUND, UNAUTHORIZED, UPLOAD_REJECTED
from snapix.presentation.api.uploads import read_image_upload

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/count-register-users",
    response_model=int,
    summary="Count registered users",
)
async def count_registered_users(dispatcher: DispatcherDep) -> int:
    return await dispatcher.dispatch(CountRegisteredUsersQuery())


# ============================================================================
# PROFILE
# ============================================================================


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get own profile",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def get_profile_info(user_id: CurrentUserId, dispatcher: DispatcherDep) -> ProfileResponse:
    profile = await dispatcher.dispatch(GetProfileInfoQuery(user_id=user_id))
    return ProfileResponse.model_validate(profile)


@router.put(
    "/profile",
    response_model=ProfileResponse,
    summary="Fill out own profile",
    description="Replaces every profile field; omitted fields are cleared.",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def fill_out_profile(
    request: UpdateProfileRequest,
    user_id: CurrentUserId,
    dispatcher: DispatcherDep,
) -> ProfileResponse:
    profile = await dispatcher.dispatch(
        FillOutProfileCommand(
            user_id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            date_of_birth=request.date_of_birth,
            city=request.city,
            country=request.country,
            about_me=request.about_me,
        )
    )
    return ProfileResponse.model_validate(profile)


# ============================================================================
# AVATAR
# ============================================================================


@router.get(
    "/profile/avatar",
    response_model=AvatarResponse,
    summary="Get own avatar",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def get_avatar(user_id: CurrentUserId, dispatcher: DispatcherDep) -> AvatarResponse:
    avatar = await dispatcher.dispatch(GetAvatarQuery(user_id=user_id))
    return AvatarResponse.model_validate(avatar)


@router.post(
    "/profile/avatar",
    response_model=AvatarResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload avatar",
    description="""
    Upload a new avatar (multipart field ``file``). Any previous avatar is
    deleted first.

    **Limits**: at most 1 MiB + 10 bytes, ``image/jpeg`` or ``image/png``.
    """,
    responses={**UNAUTHORIZED, **UPLOAD_REJECTED},
)
async def upload_avatar(
    file: Annotated[UploadFile, File(description="JPEG or PNG image")],
    user_id: CurrentUserId,
    dispatcher: DispatcherDep,
) -> AvatarResponse:
    upload = await read_image_upload(file)
    avatar = await dispatcher.dispatch(
        UploadAvatarCommand(
            owner_id=str(user_id),
            content=upload.content,
            mimetype=upload.mimetype,
            original_name=upload.original_name,
        )
    )
    return AvatarResponse.model_validate(avatar)


@router.delete(
    "/profile/avatar",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete avatar",
    responses={**UNAUTHORIZED, **BAD_REQUEST},
)
async def delete_avatar(user_id: CurrentUserId, dispatcher: DispatcherDep) -> None:
    await dispatcher.dispatch(DeleteAvatarCommand(user_id=user_id))
