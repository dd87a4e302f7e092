"""
Admin module data models.
"""

from typing import Optional
from pydantic import BaseModel


class AdminStats(BaseModel):
    """Point-in-time platform totals."""

    total_users: int = 0
    total_stores: int = 0
    total_ratings: int = 0

    model_config = {"extra": "ignore"}


class AdminUserRecord(BaseModel):
    id: int | str
    name: str
    email: str
    address: str = ""
    role: str

    model_config = {"extra": "ignore"}


class AdminStoreRecord(BaseModel):
    id: int | str
    name: str
    email: str = ""
    address: str = ""
    average_rating: Optional[float] = None
    rating_count: int = 0

    model_config = {"extra": "ignore"}
