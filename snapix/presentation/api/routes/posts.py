"""Posts API routes."""

from typing import Annotated

from fastapi import APIRouter, File, UploadFile, status

from snapix.application.files.commands import UploadPostImageCommand
from snapix.application.posts.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from snapix.application.posts.queries import GetPostQuery
from snapix.config.logging import get_logger
from snapix.presentation.api.dependencies import CurrentUserId, DispatcherDep
from snapix.presentation.api.schemas import (
    CreatePostRequest,
    FileResponse,
    PostResponse,
    UpdatePostRequest,
)
from snapix.presentation.api.schemas.common import (
    FORBIDDEN,
    NOT_FOUND,
    UNAUTHORIZED,
    UPLOAD_REJECTED,
)
from snapix.presentation.api.uploads import read_image_upload

logger = get_logger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post(
    "/image",
    response_model=FileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload post image",
    description="""
    Upload the image for a future post (multipart field ``file``).

    **Flow**:
    1. Upload the image here, keep the returned ``id``
    2. ``POST /posts`` with ``image_id`` set to that id
    """,
    responses={**UNAUTHORIZED, **UPLOAD_REJECTED},
)
async def upload_post_image(
    file: Annotated[UploadFile, File(description="JPEG or PNG image")],
    user_id: CurrentUserId,
    dispatcher: DispatcherDep,
) -> FileResponse:
    upload = await read_image_upload(file)
    stored = await dispatcher.dispatch(
        UploadPostImageCommand(
            owner_id=str(user_id),
            content=upload.content,
            mimetype=upload.mimetype,
            original_name=upload.original_name,
        )
    )
    return FileResponse.model_validate(stored)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def create_post(
    request: CreatePostRequest,
    user_id: CurrentUserId,
    dispatcher: DispatcherDep,
) -> PostResponse:
    logger.info("api.create_post.started", user_id=user_id, image_id=request.image_id)
    post = await dispatcher.dispatch(
        CreatePostCommand(user_id=user_id, content=request.content, image_id=request.image_id)
    )
    return PostResponse.model_validate(post)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post",
    responses={**NOT_FOUND},
)
async def get_post(post_id: int, dispatcher: DispatcherDep) -> PostResponse:
    post = await dispatcher.dispatch(GetPostQuery(post_id=post_id))
    return PostResponse.model_validate(post)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    summary="Edit post text",
    responses={**UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND},
)
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    user_id: CurrentUserId,
    dispatcher: DispatcherDep,
) -> PostResponse:
    post = await dispatcher.dispatch(
        UpdatePostCommand(post_id=post_id, user_id=user_id, content=request.content)
    )
    return PostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete post and its image",
    responses={**UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND},
)
async def delete_post(post_id: int, user_id: CurrentUserId, dispatcher: DispatcherDep) -> None:
    await dispatcher.dispatch(DeletePostCommand(post_id=post_id, user_id=user_id))
