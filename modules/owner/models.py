"""
Owner module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class OwnedStore(BaseModel):
    id: int | str
    name: str

    model_config = {"extra": "ignore"}


class StoreRating(BaseModel):
    """One user's rating of an owned store."""

    user_name: str
    user_email: str
    score: int

    model_config = {"extra": "ignore"}


class OwnerDashboardEntry(BaseModel):
    """Ratings report for a single owned store."""

    store: OwnedStore
    average_rating: Optional[float] = None
    ratings: list[StoreRating] = Field(default_factory=list)

    model_config = {"extra": "ignore"}
