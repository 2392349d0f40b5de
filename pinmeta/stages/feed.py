"""
Home feed ordering.

Anonymous viewers see store order (newest first, since uploads are prepended).
Viewers with preferred tags see images carrying any of those tags first, then
the rest; each group newest first. The whole collection is re-sorted on every
call, which is fine at demo scale but has no incremental index.
"""

from typing import Iterable, List, Optional, TypeVar

from ..models.image import ImageMetadata

T = TypeVar("T")


def paginate(items: List[T], page: int, page_size: int) -> List[T]:
    """Slice [page * page_size, (page + 1) * page_size). Negative input yields []."""
    if page < 0 or page_size <= 0:
        return []
    start = page * page_size
    return items[start : start + page_size]


def rank_feed(
    images: List[ImageMetadata],
    viewer: Optional[Iterable[str]] = None,
    page: int = 0,
    page_size: int = 50,
) -> List[ImageMetadata]:
    """
    One page of the feed for viewer.

    viewer is the viewer's set of preferred tags, or None for anonymous.
    An empty preference set behaves as anonymous.
    """
    preferences = set(viewer) if viewer else set()
    if not preferences:
        return paginate(list(images), page, page_size)

    ordered = sorted(
        images,
        key=lambda img: (img.has_any_tag(preferences), img.upload_timestamp),
        reverse=True,
    )
    return paginate(ordered, page, page_size)
