"""
Scoring models: ScoredImage and the TrendingCache snapshot.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from .image import ImageMetadata


class ScoredImage(BaseModel):
    """An image with the score that placed it in a result list."""

    image: ImageMetadata
    score: float


class TrendingCache(BaseModel):
    """
    Last computed trending list.

    Frozen: a new cycle publishes a new instance, never mutates this one.
    """

    model_config = ConfigDict(frozen=True)

    last_updated: int = 0
    image_ids: Tuple[str, ...] = ()


EMPTY_TRENDING = TrendingCache()
