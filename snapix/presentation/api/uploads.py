"""Upload validation - runs before any command is built.

Limits match the image endpoints: at most 1 MiB + 10 bytes, JPEG or PNG.
"""

from dataclasses import dataclass, field

from fastapi import HTTPException, UploadFile, status

MAX_UPLOAD_SIZE = 1024 * 1024 + 10
ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png"})

# Leading bytes of each allowed format
_SIGNATURES = {
    "image/jpeg": b"\xff\xd8\xff",
    "image/png": b"\x89PNG\r\n\x1a\n",
}


@dataclass(frozen=True)
class ImageUpload:
    content: bytes = field(repr=False)
    mimetype: str
    original_name: str

    @property
    def size(self) -> int:
        return len(self.content)


async def read_image_upload(file: UploadFile) -> ImageUpload:
    """Read and validate an uploaded image.

    Reads at most ``MAX_UPLOAD_SIZE + 1`` bytes, so an oversized body is
    detected without being held in memory.

    Raises:
        HTTPException: 415 for a type outside JPEG/PNG (declared or actual),
            413 when larger than the limit, 422 when empty.
    """
    mimetype = (file.content_type or "").split(";")[0].strip().lower()
    if mimetype not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only image/jpeg and image/png are accepted",
        )

    content = await file.read(MAX_UPLOAD_SIZE + 1)
    if len(content) > MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {MAX_UPLOAD_SIZE} bytes",
        )
    if not content:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="File is empty",
        )
    if not content.startswith(_SIGNATURES[mimetype]):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"File content is not {mimetype}",
        )

    return ImageUpload(
        content=content,
        mimetype=mimetype,
        original_name=file.filename or "upload",
    )
