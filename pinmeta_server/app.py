"""
PinMeta API: FastAPI app factory.

Use: uvicorn pinmeta_server.app:app
Or:  from pinmeta_server import app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pinmeta import __version__

from .config import configure_logging, get_config
from .errors import PinMetaError
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build state, start the trending worker, stop it on shutdown."""
    config = get_config()
    configure_logging(config.log_level)
    ok, errors = config.validate()
    for err in errors:
        logger.warning("[startup] config: %s", err)
    if not ok:
        raise RuntimeError("Invalid server configuration: " + "; ".join(errors))
    state = get_state()
    logger.info(
        "[startup] Trending refresh every %.0fs, window %.0fh",
        state.ranking_config.trending_interval_seconds,
        state.ranking_config.trending_window_hours,
    )
    state.worker.start()
    logger.info("[startup] PinMeta API ready")

    yield

    await state.worker.stop()


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, error mapping, and lifespan."""
    app = FastAPI(
        title="PinMeta API",
        description="Image discovery: feed, search, similar images, trending, and boards",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PinMetaError)
    async def pinmeta_error_handler(request: Request, exc: PinMetaError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    register_routes(app)
    return app


app = create_app()
