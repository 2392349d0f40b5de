"""
Ranking configuration: relevance, similarity, feed, and trending parameters.

RankingConfig defaults are defined here. The server may pass a dict
(e.g. from a ranking config JSON file); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RankingConfig(BaseModel):
    """Configuration for the content ranking engine."""

    # -------------------------------------------------------------------------
    # Relevance (search)
    # -------------------------------------------------------------------------

    # Query tokens shorter than this are discarded.
    min_token_length: int = 2

    # Per-token weights. Exact match wins over substring match for a field.
    category_exact_weight: float = 25.0
    category_partial_weight: float = 10.0
    tag_exact_weight: float = 20.0
    tag_partial_weight: float = 5.0
    color_exact_weight: float = 20.0
    color_partial_weight: float = 5.0
    description_word_weight: float = 12.0
    description_partial_weight: float = 4.0

    # Thin-metadata penalty: description shorter than short_description_length
    # with a total below short_description_score_floor is multiplied by the penalty.
    short_description_length: int = 10
    short_description_score_floor: float = 10.0
    short_description_penalty: float = 0.8

    # -------------------------------------------------------------------------
    # Similarity weights (must sum to 1.0)
    # similarity = w_tag * jaccard(tags) + w_category * same_category + w_color * same_color
    # -------------------------------------------------------------------------

    tag_similarity_weight: float = 0.6
    category_similarity_weight: float = 0.25
    color_similarity_weight: float = 0.15

    # Pool members scoring at or below this are noise and never returned.
    similarity_threshold: float = 0.05
    similar_limit: int = 10

    # -------------------------------------------------------------------------
    # Feed
    # -------------------------------------------------------------------------

    feed_page_size: int = 50

    # -------------------------------------------------------------------------
    # Trending
    # score = recent_interactions + interaction_count * trending_lifetime_weight
    # -------------------------------------------------------------------------

    trending_interval_seconds: float = 60.0
    trending_window_hours: float = 24.0
    trending_lifetime_weight: float = 0.1
    trending_top_n: int = 40

    @model_validator(mode="after")
    def similarity_weights_sum_to_one(self):
        total = (
            self.tag_similarity_weight
            + self.category_similarity_weight
            + self.color_similarity_weight
        )
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Similarity weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        for section in ("relevance", "similarity", "feed"):
            if section in config_dict:
                flat.update(config_dict[section])
        if "trending" in config_dict:
            tr = config_dict["trending"]
            for key, value in tr.items():
                flat[key if key.startswith("trending_") else f"trending_{key}"] = value
        for key, value in config_dict.items():
            if not isinstance(value, dict):
                flat[key] = value
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
