"""
Trending aggregation: periodic top-N from recent and lifetime interactions.

score = interactions in the recency window + interaction_count * lifetime_weight

The aggregator recomputes the whole list each cycle into a new TrendingCache
and publishes it with a single reference assignment, so readers never observe
a partially built list. Between cycles the cache is stale by up to one interval.
"""

import logging
import threading
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from ..models.config import RankingConfig, resolve_config
from ..models.image import ImageMetadata
from ..models.interaction import Interaction
from ..models.scoring import EMPTY_TRENDING, TrendingCache
from ..utils.time import hours_to_ms, now_ms

logger = logging.getLogger(__name__)


class ImageSource(Protocol):
    """Read access to the image catalog."""

    def list_images(self) -> List[ImageMetadata]:
        ...

    def get_image(self, image_id: str) -> Optional[ImageMetadata]:
        ...


class InteractionSource(Protocol):
    """Read access to the interaction log."""

    def list_since(self, timestamp_ms: int) -> List[Interaction]:
        """Interactions with timestamp strictly greater than timestamp_ms."""
        ...


def count_recent_interactions(
    interactions: Iterable[Interaction],
    now: int,
    window_ms: int,
) -> Dict[str, int]:
    """Interactions per image_id with timestamp > now - window_ms. All types count 1."""
    cutoff = now - window_ms
    return dict(Counter(i.image_id for i in interactions if i.timestamp > cutoff))


def trending_score(
    image: ImageMetadata,
    recent_counts: Dict[str, int],
    lifetime_weight: float = 0.1,
) -> float:
    return recent_counts.get(image.image_id, 0) + image.interaction_count * lifetime_weight


def compute_trending(
    images: List[ImageMetadata],
    interactions: Iterable[Interaction],
    now: Optional[int] = None,
    config: Optional[RankingConfig] = None,
) -> TrendingCache:
    """
    Build a fresh TrendingCache.

    Ties on score are broken by image_id ascending so the result does not
    depend on store iteration order.
    """
    config = resolve_config(config)
    if now is None:
        now = now_ms()
    recent = count_recent_interactions(
        interactions, now, hours_to_ms(config.trending_window_hours)
    )
    ranked = sorted(
        images,
        key=lambda img: (-trending_score(img, recent, config.trending_lifetime_weight), img.image_id),
    )
    top_ids = tuple(img.image_id for img in ranked[: config.trending_top_n])
    return TrendingCache(last_updated=now, image_ids=top_ids)


class TrendingAggregator:
    """
    Owns the trending cache and recomputes it on demand.

    The host schedules run_cycle() on a fixed interval. A failing cycle is
    logged and leaves the previous cache in place.
    """

    def __init__(
        self,
        images: ImageSource,
        interactions: InteractionSource,
        config: Optional[RankingConfig] = None,
        initial: Optional[TrendingCache] = None,
        on_publish: Optional[Callable[[TrendingCache], None]] = None,
    ):
        self._images = images
        self._interactions = interactions
        self.config = resolve_config(config)
        self._cache = initial if initial is not None else EMPTY_TRENDING
        self._on_publish = on_publish
        self.cycles_run = 0
        self.cycles_failed = 0
        self._cycle_lock = threading.Lock()

    @property
    def cache(self) -> TrendingCache:
        return self._cache

    def reset(self, cache: Optional[TrendingCache] = None) -> None:
        """Replace the cache outright (e.g. after the store is reseeded)."""
        self._cache = cache if cache is not None else EMPTY_TRENDING

    def run_cycle(self, now: Optional[int] = None) -> bool:
        """Recompute and publish the cache. Returns False if the cycle failed."""
        with self._cycle_lock:
            return self._run_cycle(now_ms() if now is None else now)

    def _run_cycle(self, now: int) -> bool:
        try:
            window_start = now - hours_to_ms(self.config.trending_window_hours)
            fresh = compute_trending(
                self._images.list_images(),
                self._interactions.list_since(window_start),
                now,
                self.config,
            )
            if self._on_publish is not None:
                self._on_publish(fresh)
        except Exception:
            self.cycles_failed += 1
            logger.exception("[trending] cycle failed, keeping cache from %s", self._cache.last_updated)
            return False
        self._cache = fresh
        self.cycles_run += 1
        logger.debug("[trending] published %d ids at %s", len(fresh.image_ids), fresh.last_updated)
        return True

    def get_trending(self) -> List[ImageMetadata]:
        """Cached ids resolved to live images; ids that no longer resolve are skipped."""
        cache = self._cache
        resolved = []
        for image_id in cache.image_ids:
            img = self._images.get_image(image_id)
            if img is not None:
                resolved.append(img)
        return resolved
