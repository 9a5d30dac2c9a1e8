"""Schemas shared by every router."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every failed request.

    Example:
        {"error": "NotFoundError", "message": "Post not found"}
    """

    error: str = Field(..., description="Error class name")
    message: str = Field(..., description="Human-readable message")


# Shared OpenAPI ``responses`` entries
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid access token"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}
FORBIDDEN = {403: {"model": ErrorResponse, "description": "Not the owner"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Request cannot be applied"}}
UPLOAD_REJECTED = {
    413: {"model": ErrorResponse, "description": "File larger than 1 MiB + 10 bytes"},
    415: {"model": ErrorResponse, "description": "File is not image/jpeg or image/png"},
}
