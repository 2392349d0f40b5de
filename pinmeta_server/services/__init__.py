"""Backing logic: stores and the PinMeta backend service."""

from .backend import PinMetaBackend
from .board_store import BoardStore, StorageBoardStore
from .image_store import ImageStore, StorageImageStore
from .interaction_store import InteractionStore, StorageInteractionStore
from .user_store import StorageUserStore, UserStore

__all__ = [
    "PinMetaBackend",
    "BoardStore",
    "StorageBoardStore",
    "ImageStore",
    "StorageImageStore",
    "InteractionStore",
    "StorageInteractionStore",
    "StorageUserStore",
    "UserStore",
]
