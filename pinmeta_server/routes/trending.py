"""Trending endpoints: cached read and manual refresh."""

from fastapi import APIRouter

from ..models import TrendingResponse
from ..state import get_state

router = APIRouter()


@router.get("", response_model=TrendingResponse)
def get_trending():
    """Cached trending images; stale by up to one refresh interval."""
    backend = get_state().backend
    return TrendingResponse(
        images=backend.get_trending(),
        last_updated=backend.aggregator.cache.last_updated,
    )


@router.post("/refresh")
def refresh_trending():
    """Run one aggregation cycle now."""
    backend = get_state().backend
    ok = backend.refresh_trending()
    cache = backend.aggregator.cache
    return {"refreshed": ok, "last_updated": cache.last_updated, "size": len(cache.image_ids)}
