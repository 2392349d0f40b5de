"""Board request models."""

from pydantic import BaseModel


class CreateBoardRequest(BaseModel):
    name: str


class SaveToBoardRequest(BaseModel):
    image_id: str
