"""Pydantic schemas for the posts API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreatePostRequest(BaseModel):
    """Create a post around an uploaded image.

    Example:
        {"content": "First light over Zion", "image_id": "3f2b9c..."}
    """

    content: str | None = Field(default=None, max_length=500)
    image_id: str = Field(..., min_length=1, max_length=32, description="Id from POST /posts/image")


class UpdatePostRequest(BaseModel):
    content: str | None = Field(default=None, max_length=500)


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    image_id: str
    content: str | None
    author_id: int
    created_at: datetime
    updated_at: datetime
