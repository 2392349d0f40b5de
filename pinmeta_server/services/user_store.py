"""
User store: accounts looked up by id or email, plaintext password check.

This is a simulation artifact, not an auth system: passwords are stored and
compared as given.
"""

from typing import List, Optional, Protocol

from pinmeta.models.user import User
from pinmeta.storage import KEY_USERS, Storage


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class UserStore(Protocol):
    """Protocol for user persistence."""

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return user if exists, else None."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def create(self, user: User) -> User:
        ...

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user whose email and password both match, else None."""
        ...


class StorageUserStore:
    """User store persisted as one list under the pinmeta_users key."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def _load(self) -> List[dict]:
        return self._storage.get(KEY_USERS, []) or []

    def list_users(self) -> List[User]:
        return [User.model_validate(u) for u in self._load()]

    def get_by_id(self, user_id: str) -> Optional[User]:
        for u in self._load():
            if u.get("user_id") == user_id:
                return User.model_validate(u)
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        key = _normalize_email(email)
        if not key:
            return None
        for u in self._load():
            if _normalize_email(u.get("email") or "") == key:
                return User.model_validate(u)
        return None

    def create(self, user: User) -> User:
        rows = self._load()
        rows.append(user.model_dump(mode="json"))
        self._storage.set(KEY_USERS, rows)
        return user

    def replace_all(self, users: List[User]) -> None:
        self._storage.set(KEY_USERS, [u.model_dump(mode="json") for u in users])

    def authenticate(self, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(email)
        if user is None or user.password != password:
            return None
        return user

    def count(self) -> int:
        return len(self._load())
