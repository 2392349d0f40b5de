"""Boards for the current user (or guest)."""

from typing import List

from fastapi import APIRouter

from pinmeta.models.user import Board

from ..models import CreateBoardRequest, SaveToBoardRequest
from ..state import get_state

router = APIRouter()


@router.get("", response_model=List[Board])
def list_boards():
    return get_state().backend.get_boards()


@router.post("", response_model=Board)
def create_board(request: CreateBoardRequest):
    return get_state().backend.create_board(request.name)


@router.post("/{board_id}/images", response_model=Board)
def save_to_board(board_id: str, request: SaveToBoardRequest):
    return get_state().backend.save_to_board(board_id, request.image_id)
