"""
PinMeta backend service.

Owns the stores, the current-session pointer, and the trending aggregator,
and exposes the operations the UI needs: accounts, boards, uploads,
interactions, feed, search, similar images, and trending. Constructed
explicitly with a Storage; there is no module-level instance.
"""

import logging
import random
import threading
import uuid
from typing import Any, Callable, Dict, List, Optional

from pinmeta.models.config import RankingConfig, resolve_config
from pinmeta.models.image import ImageMetadata
from pinmeta.models.interaction import INTERACTION_TYPES, Interaction
from pinmeta.models.scoring import EMPTY_TRENDING, TrendingCache
from pinmeta.models.user import Board, User
from pinmeta.stages.feed import rank_feed
from pinmeta.stages.relevance import score_relevance, search_images
from pinmeta.stages.similarity import find_similar, score_similarity
from pinmeta.stages.trending import TrendingAggregator
from pinmeta.storage import KEY_SESSION, KEY_TRENDING, Storage
from pinmeta.utils.text import tokenize_query
from pinmeta.utils.time import now_ms

from ..constants import ADMIN_USER, CATEGORIES, GUEST_USER_ID, TAGS_POOL
from ..errors import ConflictError, NotFoundError, ValidationError
from .board_store import StorageBoardStore
from .image_store import StorageImageStore
from .interaction_store import StorageInteractionStore
from .user_store import StorageUserStore

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class PinMetaBackend:
    """Service object behind the HTTP API."""

    def __init__(
        self,
        storage: Storage,
        config: Optional[RankingConfig] = None,
        clock: Callable[[], int] = now_ms,
        rng: Optional[random.Random] = None,
        seed_if_empty: bool = True,
    ):
        self.storage = storage
        self.config = resolve_config(config)
        self._clock = clock
        self._rng = rng or random.Random()
        # Stores rewrite whole lists; serializes read-modify-write across request threads
        self._lock = threading.RLock()

        self.images = StorageImageStore(storage)
        self.interactions = StorageInteractionStore(storage)
        self.users = StorageUserStore(storage)
        self.boards = StorageBoardStore(storage)

        self.aggregator = TrendingAggregator(
            self.images,
            self.interactions,
            self.config,
            initial=self._load_trending_cache(),
            on_publish=self._save_trending_cache,
        )

        if seed_if_empty and self.images.count() == 0 and self.users.count() == 0:
            self.seed_data()

    # -------------------------------------------------------------------------
    # Persistence helpers
    # -------------------------------------------------------------------------

    def _load_trending_cache(self) -> TrendingCache:
        raw = self.storage.get(KEY_TRENDING)
        if not raw:
            return EMPTY_TRENDING
        try:
            return TrendingCache.model_validate(raw)
        except ValueError:
            logger.warning("Ignoring unreadable trending cache in storage")
            return EMPTY_TRENDING

    def _save_trending_cache(self, cache: TrendingCache) -> None:
        self.storage.set(KEY_TRENDING, cache.model_dump(mode="json"))

    # -------------------------------------------------------------------------
    # Accounts and session
    # -------------------------------------------------------------------------

    def get_current_user(self) -> Optional[User]:
        """The logged-in user. The session is one process-wide pointer shared by all clients."""
        session = self.storage.get(KEY_SESSION)
        if not session:
            return None
        return self.users.get_by_id(session.get("user_id", ""))

    def _set_current_user(self, user: Optional[User]) -> None:
        if user is None:
            self.storage.delete(KEY_SESSION)
        else:
            self.storage.set(KEY_SESSION, {"user_id": user.user_id})

    def _current_user_id(self) -> str:
        user = self.get_current_user()
        return user.user_id if user else GUEST_USER_ID

    def signup(self, username: str, email: str, password: str) -> User:
        """Create an account with one random preferred tag and log it in."""
        if not username.strip() or not email.strip():
            raise ValidationError("Username and email are required")
        user = User(
            user_id=_new_id("user"),
            username=username.strip(),
            email=email.strip(),
            password=password,
            preferences=[self._rng.choice(TAGS_POOL)],
        )
        with self._lock:
            if self.users.get_by_email(email):
                raise ConflictError(f"Email already registered: {email}")
            self.users.create(user)
        self._set_current_user(user)
        logger.info("Signed up user %s", user.user_id)
        return user

    def login(self, email: str, password: str) -> Optional[User]:
        user = self.users.authenticate(email, password)
        if user is not None:
            self._set_current_user(user)
        return user

    def logout(self) -> None:
        self._set_current_user(None)

    # -------------------------------------------------------------------------
    # Boards
    # -------------------------------------------------------------------------

    def create_board(self, name: str) -> Board:
        if not name.strip():
            raise ValidationError("Board name cannot be empty")
        board = Board(board_id=_new_id("board"), user_id=self._current_user_id(), name=name.strip())
        with self._lock:
            return self.boards.create(board)

    def get_boards(self) -> List[Board]:
        return self.boards.list_for_user(self._current_user_id())

    def save_to_board(self, board_id: str, image_id: str) -> Board:
        with self._lock:
            board = self.boards.add_image(board_id, image_id)
        if board is None:
            raise NotFoundError(f"Board not found: {board_id}")
        return board

    # -------------------------------------------------------------------------
    # Seed
    # -------------------------------------------------------------------------

    def seed_data(self) -> None:
        """Reset to the initial state: one admin user, no images, empty trending."""
        with self._lock:
            self.users.replace_all([User.model_validate(ADMIN_USER)])
            self.images.clear()
            self.interactions.clear()
            self.boards.clear()
            empty = TrendingCache(last_updated=self._clock())
            self._save_trending_cache(empty)
            self.aggregator.reset(empty)
        logger.info("Seeded store with admin user")

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------

    def get_images(self) -> List[ImageMetadata]:
        return self.images.list_images()

    def get_image(self, image_id: str) -> Optional[ImageMetadata]:
        return self.images.get_image(image_id)

    def upload_image(self, data: Dict[str, Any]) -> ImageMetadata:
        """Store a new image owned by the current user (or guest), newest first."""
        category = data.get("category") or ""
        if category not in CATEGORIES:
            raise ValidationError(f"Unknown category: {category!r}")
        fields = {k: v for k, v in data.items() if k not in ("image_id", "upload_timestamp", "interaction_count", "user_id")}
        image = ImageMetadata(
            **fields,
            image_id=_new_id("img"),
            user_id=self._current_user_id(),
            upload_timestamp=self._clock(),
            interaction_count=0,
        )
        with self._lock:
            self.images.add_image(image)
        logger.info("Uploaded image %s (%s)", image.image_id, image.category)
        return image

    def interact(self, image_id: str, interaction_type: str) -> Optional[Interaction]:
        """Record an interaction by the current user. Anonymous viewers are ignored."""
        if interaction_type not in INTERACTION_TYPES:
            raise ValidationError(f"Unknown interaction type: {interaction_type!r}")
        user = self.get_current_user()
        if user is None:
            return None
        interaction = Interaction(
            interaction_id=_new_id("int"),
            user_id=user.user_id,
            image_id=image_id,
            type=interaction_type,
            timestamp=self._clock(),
        )
        with self._lock:
            self.interactions.append(interaction)
            self.images.increment_interaction_count(image_id)
        return interaction

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    def get_feed(self, page: int = 0, limit: Optional[int] = None) -> List[ImageMetadata]:
        if limit is None:
            limit = self.config.feed_page_size
        user = self.get_current_user()
        viewer = set(user.preferences) if user else None
        return rank_feed(self.images.list_images(), viewer, page, limit)

    def search(self, query: str) -> List[ImageMetadata]:
        """Relevance-ranked matches, or the default feed when the query has no tokens."""
        if not tokenize_query(query, self.config.min_token_length):
            return self.get_feed()
        return search_images(self.images.list_images(), query, self.config)

    def find_similar(self, image_id: str, limit: Optional[int] = None) -> List[ImageMetadata]:
        target = self.images.get_image(image_id)
        if target is None:
            raise NotFoundError(f"Image not found: {image_id}")
        return find_similar(target, self.images.list_images(), limit, self.config)

    def get_trending(self) -> List[ImageMetadata]:
        return self.aggregator.get_trending()

    def refresh_trending(self) -> bool:
        return self.aggregator.run_cycle(self._clock())

    def score_relevance(self, image: ImageMetadata, query: str) -> float:
        return score_relevance(image, query, self.config)

    def score_similarity(self, a: ImageMetadata, b: ImageMetadata) -> float:
        return score_similarity(a, b, self.config)

    def stats(self) -> Dict[str, Any]:
        cache = self.aggregator.cache
        return {
            "images": self.images.count(),
            "users": self.users.count(),
            "interactions": self.interactions.count(),
            "boards": self.boards.count(),
            "trending": {
                "last_updated": cache.last_updated,
                "size": len(cache.image_ids),
                "cycles_run": self.aggregator.cycles_run,
                "cycles_failed": self.aggregator.cycles_failed,
            },
        }
