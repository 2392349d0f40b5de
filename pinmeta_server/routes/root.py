"""Root and health endpoints."""

from fastapi import APIRouter

from pinmeta import __version__

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "PinMeta API",
        "version": __version__,
        "storage": state.config.storage_backend,
        "endpoints": {
            "users": ["/api/users/signup", "/api/users/login", "/api/users/logout", "/api/users/me"],
            "images": ["/api/images/feed", "/api/images/search", "/api/images/{id}/similar"],
            "trending": ["/api/trending", "/api/trending/refresh"],
            "boards": ["/api/boards", "/api/boards/{id}/images"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "trending_worker": state.worker.running,
        "trending_last_updated": state.backend.aggregator.cache.last_updated,
    }
