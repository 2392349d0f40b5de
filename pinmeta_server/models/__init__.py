"""Pydantic request/response models for the API."""

from .boards import CreateBoardRequest, SaveToBoardRequest
from .images import (
    ImageListResponse,
    InteractRequest,
    InteractResponse,
    TrendingResponse,
    UploadImageRequest,
)
from .users import LoginRequest, SignupRequest, UserResponse

__all__ = [
    "CreateBoardRequest",
    "SaveToBoardRequest",
    "ImageListResponse",
    "InteractRequest",
    "InteractResponse",
    "TrendingResponse",
    "UploadImageRequest",
    "LoginRequest",
    "SignupRequest",
    "UserResponse",
]
