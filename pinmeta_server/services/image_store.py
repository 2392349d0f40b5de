"""
Image Store abstraction.

Supplies the image catalog to the ranking engine and records uploads and
interaction counter increments. Images are never deleted.
"""

from typing import List, Optional, Protocol

from pinmeta.models.image import ImageMetadata, ensure_images
from pinmeta.storage import KEY_IMAGES, Storage


class ImageStore(Protocol):
    """Protocol for image catalog read/write."""

    def list_images(self) -> List[ImageMetadata]:
        """All images in store order (newest upload first)."""
        ...

    def get_image(self, image_id: str) -> Optional[ImageMetadata]:
        ...

    def add_image(self, image: ImageMetadata) -> ImageMetadata:
        """Insert at the front of the catalog."""
        ...

    def increment_interaction_count(self, image_id: str) -> Optional[ImageMetadata]:
        """Bump the lifetime counter. Returns None for unknown ids."""
        ...


class StorageImageStore:
    """Image store persisted as one list under the pinmeta_images key."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def _load(self) -> List[dict]:
        return self._storage.get(KEY_IMAGES, []) or []

    def _save(self, rows: List[dict]) -> None:
        self._storage.set(KEY_IMAGES, rows)

    def list_images(self) -> List[ImageMetadata]:
        return ensure_images(self._load())

    def get_image(self, image_id: str) -> Optional[ImageMetadata]:
        for row in self._load():
            if row.get("image_id") == image_id:
                return ImageMetadata.model_validate(row)
        return None

    def add_image(self, image: ImageMetadata) -> ImageMetadata:
        rows = self._load()
        rows.insert(0, image.model_dump(mode="json"))
        self._save(rows)
        return image

    def increment_interaction_count(self, image_id: str) -> Optional[ImageMetadata]:
        rows = self._load()
        for row in rows:
            if row.get("image_id") == image_id:
                row["interaction_count"] = int(row.get("interaction_count") or 0) + 1
                self._save(rows)
                return ImageMetadata.model_validate(row)
        return None

    def clear(self) -> None:
        self._save([])

    def count(self) -> int:
        return len(self._load())
