"""
Stores module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

MIN_SCORE = 1
MAX_SCORE = 5


class StoreRecord(BaseModel):
    """A store as seen by a regular user, including their own rating."""

    id: int | str
    name: str
    email: str = ""
    address: str = ""
    overall_rating: Optional[float] = Field(None, description="Average of all ratings")
    my_rating: Optional[int] = Field(None, ge=MIN_SCORE, le=MAX_SCORE)
    rating_count: int = 0

    model_config = {"extra": "ignore"}


class RatingRequest(BaseModel):
    """Body for POST /stores/{id}/rating."""

    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
