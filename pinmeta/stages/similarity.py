"""
Metadata similarity between images and "more like this" search.

similarity = w_tag * jaccard(tags) + w_category * same_category + w_color * same_color
"""

from typing import List, Optional

from ..models.config import RankingConfig, resolve_config
from ..models.image import ImageMetadata
from ..models.scoring import ScoredImage


def tag_jaccard(a: ImageMetadata, b: ImageMetadata) -> float:
    """Jaccard index of the two case-insensitive tag sets (0 when both are empty)."""
    set_a = {t.lower() for t in a.tags}
    set_b = {t.lower() for t in b.tags}
    union = len(set_a | set_b) or 1
    return len(set_a & set_b) / union


def score_similarity(
    a: ImageMetadata,
    b: ImageMetadata,
    config: Optional[RankingConfig] = None,
) -> float:
    """Similarity in [0, 1]. An image is never similar to itself."""
    if a.image_id == b.image_id:
        return 0.0
    config = resolve_config(config)
    score = tag_jaccard(a, b) * config.tag_similarity_weight
    if a.category.lower() == b.category.lower():
        score += config.category_similarity_weight
    if a.dominant_color.lower() == b.dominant_color.lower():
        score += config.color_similarity_weight
    return score


def score_similar(
    target: ImageMetadata,
    pool: List[ImageMetadata],
    limit: Optional[int] = None,
    config: Optional[RankingConfig] = None,
) -> List[ScoredImage]:
    """
    Pool members above the noise threshold, most similar first.

    Sort is stable, so ties keep the pool's relative order.
    """
    config = resolve_config(config)
    if limit is None:
        limit = config.similar_limit
    scored = [ScoredImage(image=img, score=score_similarity(target, img, config)) for img in pool]
    scored = [s for s in scored if s.score > config.similarity_threshold]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[: max(limit, 0)]


def find_similar(
    target: ImageMetadata,
    pool: List[ImageMetadata],
    limit: Optional[int] = None,
    config: Optional[RankingConfig] = None,
) -> List[ImageMetadata]:
    """Up to limit images from pool most similar to target."""
    return [s.image for s in score_similar(target, pool, limit, config)]
