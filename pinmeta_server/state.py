"""Application state: storage, backend service, and the trending worker."""

import logging
from typing import Optional

from pinmeta.storage import InMemoryStorage, JsonFileStorage, Storage

from .config import ServerConfig, get_config
from .services import PinMetaBackend
from .worker import TrendingWorker

logger = logging.getLogger(__name__)


def create_storage(config: ServerConfig) -> Storage:
    """Storage backend selected by config (memory or json)."""
    if config.storage_backend == "json":
        logger.info("[startup] Storage: JSON file %s", config.storage_path)
        return JsonFileStorage(config.storage_path)
    logger.info("[startup] Storage: in-memory")
    return InMemoryStorage()


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, storage: Optional[Storage] = None):
        self.config = config
        self.ranking_config = config.load_ranking_config()
        self.storage = storage if storage is not None else create_storage(config)
        self.backend = PinMetaBackend(
            self.storage,
            self.ranking_config,
            seed_if_empty=config.seed_on_start,
        )
        self.worker = TrendingWorker(
            self.backend.aggregator,
            self.ranking_config.trending_interval_seconds,
        )


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Install (or clear, with None) the process-wide state. Used by tests."""
    global _state
    _state = state
