"""
Auth module data models.

Request and response bodies for the backend's /auth endpoints.
"""

from pydantic import BaseModel, Field

from modules.session.models import UserProfile


class LoginRequest(BaseModel):
    """Credentials for POST /auth/login."""

    email: str
    password: str


class SignupRequest(BaseModel):
    """
    Registration data for POST /auth/signup.

    No format checks here: the backend is authoritative. See
    validation.SIGNUP_RULES for the advertised constraints.
    """

    name: str
    email: str
    address: str
    password: str


class PasswordChangeRequest(BaseModel):
    """Body for PUT /auth/password."""

    old_password: str
    new_password: str


class AuthResponse(BaseModel):
    """Session issued by login and signup."""

    access_token: str = Field(..., min_length=1)
    user: UserProfile

    model_config = {"extra": "ignore"}
