"""Image, interaction, and trending request/response models."""

from typing import List, Optional

from pydantic import BaseModel

from pinmeta.models.image import ImageMetadata
from pinmeta.models.interaction import Interaction, InteractionType


class UploadImageRequest(BaseModel):
    """Upload payload; id, owner, timestamp, and counter are assigned by the server."""

    category: str
    tags: List[str] = []
    description: str = ""
    dominant_color: str = ""
    image_url: str = ""
    board_id: Optional[str] = None


class InteractRequest(BaseModel):
    type: InteractionType = "like"


class InteractResponse(BaseModel):
    recorded: bool
    interaction: Optional[Interaction] = None


class ImageListResponse(BaseModel):
    images: List[ImageMetadata]
    total: int


class TrendingResponse(BaseModel):
    images: List[ImageMetadata]
    last_updated: int
