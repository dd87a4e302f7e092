"""
Admin module.

Public API:
- AdminDashboard: Stats and the user/store tables
- AdminStats, AdminUserRecord, AdminStoreRecord: Models
"""

from .models import AdminStats, AdminStoreRecord, AdminUserRecord
from .service import (
    ADMIN_SORT_FIELDS,
    ROLE_CHOICES,
    STORE_FILTER_FIELDS,
    USER_FILTER_FIELDS,
    AdminDashboard,
)

__all__ = [
    "AdminStats",
    "AdminStoreRecord",
    "AdminUserRecord",
    "ADMIN_SORT_FIELDS",
    "ROLE_CHOICES",
    "STORE_FILTER_FIELDS",
    "USER_FILTER_FIELDS",
    "AdminDashboard",
]
