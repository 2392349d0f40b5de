"""
Interaction Store abstraction.

Append-only log of likes, saves, and comments. There is no retention policy:
the log grows without bound and the trending stage only reads the recent window.
"""

from typing import List, Protocol

from pinmeta.models.interaction import Interaction, ensure_interactions
from pinmeta.storage import KEY_INTERACTIONS, Storage


class InteractionStore(Protocol):
    """Protocol for the interaction log."""

    def append(self, interaction: Interaction) -> None:
        ...

    def list_interactions(self) -> List[Interaction]:
        ...

    def list_since(self, timestamp_ms: int) -> List[Interaction]:
        """Interactions with timestamp strictly greater than timestamp_ms."""
        ...

    def count(self) -> int:
        ...


class StorageInteractionStore:
    """Interaction log persisted as one list under the pinmeta_interactions key."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def _load(self) -> List[dict]:
        return self._storage.get(KEY_INTERACTIONS, []) or []

    def append(self, interaction: Interaction) -> None:
        rows = self._load()
        rows.append(interaction.model_dump(mode="json"))
        self._storage.set(KEY_INTERACTIONS, rows)

    def list_interactions(self) -> List[Interaction]:
        return ensure_interactions(self._load())

    def list_since(self, timestamp_ms: int) -> List[Interaction]:
        return ensure_interactions(
            [row for row in self._load() if int(row.get("timestamp") or 0) > timestamp_ms]
        )

    def count(self) -> int:
        return len(self._load())

    def clear(self) -> None:
        self._storage.set(KEY_INTERACTIONS, [])
