"""Shared fixtures and builders for the PinMeta test suite."""

import random
from typing import Dict, List, Optional

import pytest

from pinmeta.models.image import ImageMetadata
from pinmeta.models.interaction import Interaction
from pinmeta.storage import InMemoryStorage
from pinmeta_server.services.backend import PinMetaBackend

BASE_TIME_MS = 1_700_000_000_000
HOUR_MS = 3600 * 1000


def make_image(image_id: str, **overrides) -> ImageMetadata:
    """Image with neutral metadata that matches nothing unless overridden."""
    fields = {
        "image_id": image_id,
        "user_id": "user_1",
        "category": "Photography",
        "tags": [],
        "description": "an unremarkable picture of something",
        "dominant_color": "#abcdef",
        "upload_timestamp": BASE_TIME_MS,
        "image_url": f"https://img.example/{image_id}.jpg",
        "interaction_count": 0,
    }
    fields.update(overrides)
    return ImageMetadata(**fields)


def make_interaction(image_id: str, timestamp: int, n: int = 0, kind: str = "like") -> Interaction:
    return Interaction(
        interaction_id=f"int_{image_id}_{n}_{timestamp}",
        user_id="user_1",
        image_id=image_id,
        type=kind,
        timestamp=timestamp,
    )


class ListImageSource:
    """In-memory ImageSource for aggregator tests."""

    def __init__(self, images: List[ImageMetadata]):
        self.images = list(images)

    def list_images(self) -> List[ImageMetadata]:
        return list(self.images)

    def get_image(self, image_id: str) -> Optional[ImageMetadata]:
        for img in self.images:
            if img.image_id == image_id:
                return img
        return None


class ListInteractionSource:
    """In-memory InteractionSource for aggregator tests."""

    def __init__(self, interactions: List[Interaction]):
        self.interactions = list(interactions)

    def list_since(self, timestamp_ms: int) -> List[Interaction]:
        return [i for i in self.interactions if i.timestamp > timestamp_ms]


class StepClock:
    """Deterministic clock: each call advances by step milliseconds."""

    def __init__(self, start: int = BASE_TIME_MS, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


@pytest.fixture
def forest_image() -> ImageMetadata:
    return make_image(
        "img_forest",
        category="Nature",
        tags=["forest", "green"],
        dominant_color="#00ff00",
        description="a quiet forest path",
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def backend(storage, clock) -> PinMetaBackend:
    return PinMetaBackend(storage, clock=clock, rng=random.Random(7))


def upload(backend: PinMetaBackend, **fields) -> ImageMetadata:
    data: Dict = {
        "category": "Nature",
        "tags": [],
        "description": "",
        "dominant_color": "#000000",
        "image_url": "https://img.example/x.jpg",
    }
    data.update(fields)
    return backend.upload_image(data)
