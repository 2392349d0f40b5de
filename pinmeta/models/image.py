"""
Image model: typed representation of an image's metadata for the ranking engine.

Used by relevance, similarity, feed, and trending stages instead of raw dicts.
Built from stored dicts via ImageMetadata.model_validate(d).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ImageMetadata(BaseModel):
    """
    Image payload used across the ranking stages.

    upload_timestamp is epoch milliseconds and doubles as upload order.
    interaction_count is a lifetime counter that only increases.
    """

    model_config = ConfigDict(extra="allow")

    image_id: str
    user_id: str = "guest"
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    description: str = ""
    dominant_color: str = ""
    upload_timestamp: int = 0
    board_id: Optional[str] = None
    image_url: str = ""
    interaction_count: int = 0

    def has_any_tag(self, tags) -> bool:
        """True if at least one of this image's tags is in tags (exact match)."""
        return any(t in tags for t in self.tags)


def ensure_images(images: List[Union[Dict[str, Any], "ImageMetadata"]]) -> List["ImageMetadata"]:
    """Convert list of dicts or ImageMetadata to list of models for use in the pipeline."""
    return [
        ImageMetadata.model_validate(img) if isinstance(img, dict) else img
        for img in images
    ]
