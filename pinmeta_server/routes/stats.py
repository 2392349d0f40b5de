"""Stats endpoint."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/stats")
def get_stats():
    """Get current store and trending statistics."""
    return get_state().backend.stats()
