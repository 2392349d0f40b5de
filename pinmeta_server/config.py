"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pinmeta.models.config import RankingConfig

# Single .env at the project root
_root_env = Path(__file__).resolve().parent.parent / ".env"
if _root_env.exists():
    load_dotenv(_root_env)

STORAGE_BACKENDS = ("memory", "json")


def _env_bool(key: str, default: bool) -> bool:
    v = os.getenv(key)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Storage: "memory" | "json"
    storage_backend: str = "memory"
    storage_path: Path = Path(__file__).parent.parent / "data" / "pinmeta.json"

    # Ranking parameters: optional JSON file merged over RankingConfig defaults
    ranking_config_path: Optional[Path] = None
    # Overrides ranking trending_interval_seconds when set
    trending_interval_seconds: Optional[float] = None

    # Seed the admin user when the store is empty
    seed_on_start: bool = True

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        interval = os.getenv("TRENDING_INTERVAL_SECONDS")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            storage_backend=os.getenv("STORAGE_BACKEND", "memory").strip().lower() or "memory",
            storage_path=_path_env("STORAGE_PATH", base_dir / "data" / "pinmeta.json"),
            ranking_config_path=_path_env("RANKING_CONFIG_PATH"),
            trending_interval_seconds=float(interval) if interval else None,
            seed_on_start=_env_bool("SEED_ON_START", True),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.storage_backend not in STORAGE_BACKENDS:
            errors.append(f"Unknown storage backend: {self.storage_backend}")

        if self.ranking_config_path and not self.ranking_config_path.exists():
            errors.append(f"Ranking config not found: {self.ranking_config_path}")

        if self.trending_interval_seconds is not None and self.trending_interval_seconds <= 0:
            errors.append("Trending interval must be positive")

        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """RankingConfig from ranking_config_path (if any) with the interval override applied."""
        data = {}
        if self.ranking_config_path:
            with open(self.ranking_config_path) as f:
                data = json.load(f)
        if self.trending_interval_seconds is not None:
            data["trending_interval_seconds"] = self.trending_interval_seconds
        return RankingConfig.from_dict(data)


def configure_logging(level: str = "INFO") -> None:
    """Set root logging format and level once at startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
