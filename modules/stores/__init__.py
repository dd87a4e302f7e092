"""
Stores module.

Public API:
- StoreListView: Store browsing list with the rating flow
- StoreRecord, RatingRequest: Models
- InvalidScoreError
"""

from .models import MAX_SCORE, MIN_SCORE, RatingRequest, StoreRecord
from .exceptions import InvalidScoreError
from .service import STORE_FILTER_FIELDS, STORE_SORT_FIELDS, StoreListView

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "RatingRequest",
    "StoreRecord",
    "InvalidScoreError",
    "STORE_FILTER_FIELDS",
    "STORE_SORT_FIELDS",
    "StoreListView",
]
