"""
Interaction model: a user action (like, save, comment) on an image.

Used by the trending stage for recent-interaction counts.
Built from stored dicts via Interaction.model_validate(d) or ensure_interactions().
"""

from typing import Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict

InteractionType = Literal["like", "save", "comment"]

INTERACTION_TYPES = ("like", "save", "comment")


class Interaction(BaseModel):
    """
    A single interaction event. Append-only; never mutated after creation.

    timestamp: epoch milliseconds.
    """

    model_config = ConfigDict(extra="allow")

    interaction_id: str
    user_id: str
    image_id: str
    type: InteractionType = "like"
    timestamp: int = 0


def ensure_interactions(
    items: List[Union[Dict, "Interaction"]],
) -> List["Interaction"]:
    """Convert list of dicts or Interactions to list of Interaction models for the pipeline."""
    return [
        Interaction.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
