"""Image catalog, feed, search, similar images, uploads, and interactions."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from pinmeta.models.image import ImageMetadata

from ..models import ImageListResponse, InteractRequest, InteractResponse, UploadImageRequest
from ..state import get_state

router = APIRouter()


@router.get("/feed", response_model=ImageListResponse)
def get_feed(page: int = Query(0, ge=0), limit: Optional[int] = Query(None, ge=1, le=200)):
    """One page of the feed, biased to the current user's preferred tags."""
    images = get_state().backend.get_feed(page, limit)
    return ImageListResponse(images=images, total=len(images))


@router.get("/search", response_model=ImageListResponse)
def search(q: str = Query("")):
    """Relevance-ranked search; an empty query returns the default feed."""
    images = get_state().backend.search(q)
    return ImageListResponse(images=images, total=len(images))


@router.get("", response_model=ImageListResponse)
def list_images(limit: Optional[int] = Query(None, ge=1), offset: int = Query(0, ge=0)):
    """All images in store order."""
    images = get_state().backend.get_images()
    paginated = images[offset : offset + limit] if limit else images[offset:]
    return ImageListResponse(images=paginated, total=len(images))


@router.post("", response_model=ImageMetadata)
def upload_image(request: UploadImageRequest):
    return get_state().backend.upload_image(request.model_dump())


@router.get("/{image_id}", response_model=ImageMetadata)
def get_image(image_id: str):
    img = get_state().backend.get_image(image_id)
    if img is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return img


@router.get("/{image_id}/similar", response_model=ImageListResponse)
def similar_images(image_id: str, limit: int = Query(10, ge=1, le=100)):
    images = get_state().backend.find_similar(image_id, limit)
    return ImageListResponse(images=images, total=len(images))


@router.post("/{image_id}/interact", response_model=InteractResponse)
def interact(image_id: str, request: InteractRequest):
    """Record a like/save/comment. Ignored (recorded=false) when nobody is logged in."""
    backend = get_state().backend
    if backend.get_image(image_id) is None:
        raise HTTPException(status_code=404, detail="Image not found")
    interaction = backend.interact(image_id, request.type)
    return InteractResponse(recorded=interaction is not None, interaction=interaction)
