"""
User and board models.

Passwords are stored and compared in plaintext; this service has no security model.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A registered user with preferred tags used to bias the feed."""

    model_config = ConfigDict(extra="allow")

    user_id: str
    username: str
    email: str
    password: Optional[str] = None
    preferences: List[str] = Field(default_factory=list)

    def public_dict(self) -> dict:
        """User fields safe to return from the API (no password)."""
        return self.model_dump(exclude={"password"})


class Board(BaseModel):
    """A named collection of image ids owned by a user."""

    model_config = ConfigDict(extra="allow")

    board_id: str
    user_id: str
    name: str
    image_ids: List[str] = Field(default_factory=list)
