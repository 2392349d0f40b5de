"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .boards import router as boards_router
from .images import router as images_router
from .root import router as root_router
from .stats import router as stats_router
from .trending import router as trending_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(images_router, prefix="/api/images", tags=["images"])
    app.include_router(trending_router, prefix="/api/trending", tags=["trending"])
    app.include_router(boards_router, prefix="/api/boards", tags=["boards"])
    app.include_router(stats_router, prefix="/api", tags=["stats"])
