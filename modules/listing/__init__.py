"""
Listing module.

Public API:
- QueryListController: Criteria-bound, self-refreshing result collection
- FilterCriteria, SortCriteria, SortOrder: Criteria models
- InvalidCriteriaError
"""

from .models import FilterCriteria, SortCriteria, SortOrder
from .exceptions import InvalidCriteriaError
from .controller import QueryListController

__all__ = [
    "FilterCriteria",
    "SortCriteria",
    "SortOrder",
    "InvalidCriteriaError",
    "QueryListController",
]
