"""
Search relevance: score an image against a tokenized text query.

Each token contributes independently across category, tags, dominant color,
and description; contributions are summed so images matching more tokens
rank higher. Thin metadata that only scraped a weak match is penalized.
"""

from typing import List, Optional

from ..models.config import RankingConfig, resolve_config
from ..models.image import ImageMetadata
from ..models.scoring import ScoredImage
from ..utils.text import contains_word, tokenize_query


def _token_score(image: ImageMetadata, token: str, config: RankingConfig) -> float:
    score = 0.0

    category = image.category.lower()
    if category == token:
        score += config.category_exact_weight
    elif token in category:
        score += config.category_partial_weight

    for tag in image.tags:
        t = tag.lower()
        if t == token:
            score += config.tag_exact_weight
        elif token in t:
            score += config.tag_partial_weight

    color = image.dominant_color.lower()
    if color == token or color == "#" + token:
        score += config.color_exact_weight
    elif token in color:
        score += config.color_partial_weight

    description = image.description.lower()
    if token in description:
        if contains_word(description, token):
            score += config.description_word_weight
        else:
            score += config.description_partial_weight

    return score


def score_relevance(
    image: ImageMetadata,
    query: str,
    config: Optional[RankingConfig] = None,
) -> float:
    """
    Relevance of image to query (>= 0).

    Returns 0 when the query has no usable tokens; callers treat that as
    "no query" and fall back to default ordering.
    """
    config = resolve_config(config)
    tokens = tokenize_query(query, config.min_token_length)
    if not tokens:
        return 0.0

    total = sum(_token_score(image, token, config) for token in tokens)

    if (
        len(image.description) < config.short_description_length
        and total < config.short_description_score_floor
    ):
        total *= config.short_description_penalty
    return total


def score_search_results(
    images: List[ImageMetadata],
    query: str,
    config: Optional[RankingConfig] = None,
) -> List[ScoredImage]:
    """Score every image, drop non-matches, sort by score descending (stable)."""
    config = resolve_config(config)
    scored = [ScoredImage(image=img, score=score_relevance(img, query, config)) for img in images]
    scored = [s for s in scored if s.score > 0]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def search_images(
    images: List[ImageMetadata],
    query: str,
    config: Optional[RankingConfig] = None,
) -> List[ImageMetadata]:
    """Images matching query, most relevant first."""
    return [s.image for s in score_search_results(images, query, config)]
