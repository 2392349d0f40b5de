"""
PinMeta API Server

Usage: uvicorn pinmeta_server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import PinMetaBackend

__all__ = [
    "app",
    "create_app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "PinMetaBackend",
]
