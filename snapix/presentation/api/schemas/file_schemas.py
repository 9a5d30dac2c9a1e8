"""File response schema."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileResponse(BaseModel):
    """Stored image. ``id`` is what ``POST /posts`` takes as ``image_id``."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    type: str
    url: str
    original_name: str
    mimetype: str
    size: int
    created_at: datetime
