"""Data models for the ranking engine."""

from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .image import ImageMetadata, ensure_images
from .interaction import INTERACTION_TYPES, Interaction, InteractionType, ensure_interactions
from .scoring import EMPTY_TRENDING, ScoredImage, TrendingCache
from .user import Board, User

__all__ = [
    "DEFAULT_CONFIG",
    "EMPTY_TRENDING",
    "INTERACTION_TYPES",
    "Board",
    "ImageMetadata",
    "Interaction",
    "InteractionType",
    "RankingConfig",
    "ScoredImage",
    "TrendingCache",
    "User",
    "ensure_images",
    "ensure_interactions",
    "resolve_config",
]
