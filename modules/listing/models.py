"""
Listing module data models.

Criteria objects are immutable: every change produces a new instance, which
is what the controllers compare against.
"""

from enum import Enum
from pydantic import BaseModel, Field

from .exceptions import InvalidCriteriaError


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterCriteria(BaseModel):
    """
    Substring filters per field.

    An empty string means no constraint on that field.
    """

    name: str = ""
    email: str = ""
    address: str = ""
    role: str = ""

    model_config = {"frozen": True}

    def with_field(self, field: str, value: str) -> "FilterCriteria":
        """Return a copy with one field replaced."""
        if field not in type(self).model_fields:
            raise InvalidCriteriaError(f"Unknown filter field: {field}", field=field)
        return self.model_copy(update={field: value})


class SortCriteria(BaseModel):
    """The single active sort key and its direction."""

    by: str = Field(default="name", min_length=1)
    order: SortOrder = SortOrder.ASC

    model_config = {"frozen": True}
