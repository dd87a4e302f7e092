"""
Listing module exceptions.
"""

from typing import Optional

from shared.exceptions import ValidationError


class InvalidCriteriaError(ValidationError):
    """Raised when filter or sort criteria name a field the list does not support."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="INVALID_CRITERIA",
            details={"field": field},
        )
