"""Board store: named image collections per user."""

from typing import List, Optional, Protocol

from pinmeta.models.user import Board
from pinmeta.storage import KEY_BOARDS, Storage


class BoardStore(Protocol):
    """Protocol for board persistence."""

    def create(self, board: Board) -> Board:
        ...

    def get(self, board_id: str) -> Optional[Board]:
        ...

    def list_for_user(self, user_id: str) -> List[Board]:
        ...

    def add_image(self, board_id: str, image_id: str) -> Optional[Board]:
        """Append image_id unless already present. Returns None for unknown boards."""
        ...


class StorageBoardStore:
    """Board store persisted as one list under the pinmeta_boards key."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def _load(self) -> List[dict]:
        return self._storage.get(KEY_BOARDS, []) or []

    def create(self, board: Board) -> Board:
        rows = self._load()
        rows.append(board.model_dump(mode="json"))
        self._storage.set(KEY_BOARDS, rows)
        return board

    def get(self, board_id: str) -> Optional[Board]:
        for row in self._load():
            if row.get("board_id") == board_id:
                return Board.model_validate(row)
        return None

    def list_for_user(self, user_id: str) -> List[Board]:
        return [Board.model_validate(b) for b in self._load() if b.get("user_id") == user_id]

    def add_image(self, board_id: str, image_id: str) -> Optional[Board]:
        rows = self._load()
        for row in rows:
            if row.get("board_id") != board_id:
                continue
            image_ids = row.setdefault("image_ids", [])
            if image_id not in image_ids:
                image_ids.append(image_id)
                self._storage.set(KEY_BOARDS, rows)
            return Board.model_validate(row)
        return None

    def clear(self) -> None:
        self._storage.set(KEY_BOARDS, [])

    def count(self) -> int:
        return len(self._load())
