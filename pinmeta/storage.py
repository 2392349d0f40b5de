"""
Storage capability.

The ranking engine's host persists everything through a small key-value
interface. Implementations: in-memory (tests, default) and a single JSON file.
Swapping the backend must not change any ranking behavior.
"""

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

logger = logging.getLogger(__name__)

KEY_IMAGES = "pinmeta_images"
KEY_USERS = "pinmeta_users"
KEY_INTERACTIONS = "pinmeta_interactions"
KEY_BOARDS = "pinmeta_boards"
KEY_TRENDING = "pinmeta_trending"
KEY_SESSION = "pinmeta_session"


class Storage(Protocol):
    """Protocol for key-value persistence. Values must be JSON-compatible."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return stored value for key, or default when missing."""
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...

    def list(self, prefix: str = "") -> List[str]:
        """Keys starting with prefix, sorted."""
        ...


class InMemoryStorage:
    """Dict-backed storage. Values are copied in and out so callers cannot alias them."""

    def __init__(self, initial: Dict[str, Any] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def list(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._data if k.startswith(prefix))


class JsonFileStorage(InMemoryStorage):
    """Storage backed by one JSON file (e.g. data/pinmeta.json). Writes through on every change."""

    def __init__(self, path: Union[Path, str]):
        super().__init__()
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Guards _data mutation and the tmp-file write
        self._lock = threading.Lock()
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError):
            logger.exception("Storage corrupt at %s, starting empty", self._path)
            return
        if isinstance(data, dict):
            self._data = data
        else:
            logger.warning("Storage at %s is not a JSON object, starting empty", self._path)

    def _save(self) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)
        tmp.replace(self._path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return super().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            super().set(key, value)
            self._save()

    def list(self, prefix: str = "") -> List[str]:
        with self._lock:
            return super().list(prefix)

    def delete(self, key: str) -> None:
        with self._lock:
            if key in self._data:
                super().delete(key)
                self._save()
