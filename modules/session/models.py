"""
Session module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Account role issued by the backend."""

    ADMIN = "admin"
    USER = "user"
    OWNER = "owner"


class UserProfile(BaseModel):
    """
    The logged-in user's profile as returned by the backend.

    Immutable for the lifetime of a session.
    """

    id: int | str = Field(..., description="User ID")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    address: str = Field(default="", description="Postal address")
    role: Role = Field(..., description="Account role")

    model_config = {"frozen": True, "extra": "ignore"}


class Session(BaseModel):
    """
    An auth token paired with the user it authorizes.

    Either both fields are set or neither is.
    """

    token: Optional[str] = None
    user: Optional[UserProfile] = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None


ANONYMOUS = Session()
