"""
PinMeta Content Ranking Engine

Single entry point for the ranking package:
- models/: ImageMetadata, Interaction, User, Board, RankingConfig, TrendingCache
- stages/: relevance (search), similarity, feed, trending
- storage: Storage protocol with in-memory and JSON file backends
"""

from .models import (
    DEFAULT_CONFIG,
    Board,
    ImageMetadata,
    Interaction,
    RankingConfig,
    ScoredImage,
    TrendingCache,
    User,
    ensure_images,
    ensure_interactions,
    resolve_config,
)
from .stages import (
    TrendingAggregator,
    compute_trending,
    find_similar,
    rank_feed,
    score_relevance,
    score_similar,
    score_similarity,
    search_images,
)
from .storage import InMemoryStorage, JsonFileStorage, Storage

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Board",
    "ImageMetadata",
    "Interaction",
    "RankingConfig",
    "ScoredImage",
    "TrendingCache",
    "User",
    "ensure_images",
    "ensure_interactions",
    "resolve_config",
    "TrendingAggregator",
    "compute_trending",
    "find_similar",
    "rank_feed",
    "score_relevance",
    "score_similar",
    "score_similarity",
    "search_images",
    "InMemoryStorage",
    "JsonFileStorage",
    "Storage",
]
