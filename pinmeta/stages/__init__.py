"""Ranking stages: search relevance, similarity, feed ordering, trending aggregation."""

from .feed import paginate, rank_feed
from .relevance import score_relevance, score_search_results, search_images
from .similarity import find_similar, score_similar, score_similarity, tag_jaccard
from .trending import (
    ImageSource,
    InteractionSource,
    TrendingAggregator,
    compute_trending,
    count_recent_interactions,
    trending_score,
)

__all__ = [
    "paginate",
    "rank_feed",
    "score_relevance",
    "score_search_results",
    "search_images",
    "find_similar",
    "score_similar",
    "score_similarity",
    "tag_jaccard",
    "ImageSource",
    "InteractionSource",
    "TrendingAggregator",
    "compute_trending",
    "count_recent_interactions",
    "trending_score",
]
