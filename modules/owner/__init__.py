"""
Owner module.

Public API:
- OwnerDashboardView: Per-store rating reports for the owner role
- OwnerDashboardEntry, OwnedStore, StoreRating: Models
"""

from .models import OwnedStore, OwnerDashboardEntry, StoreRating
from .service import OwnerDashboardView

__all__ = [
    "OwnedStore",
    "OwnerDashboardEntry",
    "StoreRating",
    "OwnerDashboardView",
]
