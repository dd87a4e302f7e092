"""
Signup constraints.

One rule set serves both the hints shown next to the signup fields and the
optional client-side pre-check. The rules mirror the backend's and must never
be stricter.
"""

import re
from dataclasses import dataclass
from typing import Callable

from .models import SignupRequest

_SPECIAL = re.compile(r"[^A-Za-z0-9]")
_UPPER = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class SignupRule:
    """A single advertised constraint on a signup field."""

    field: str
    description: str
    check: Callable[[str], bool]


SIGNUP_RULES: tuple[SignupRule, ...] = (
    SignupRule(
        field="name",
        description="Name must be 20-60 characters",
        check=lambda v: 20 <= len(v) <= 60,
    ),
    SignupRule(
        field="address",
        description="Address must be at most 400 characters",
        check=lambda v: len(v) <= 400,
    ),
    SignupRule(
        field="password",
        description="Password must be 8-16 characters",
        check=lambda v: 8 <= len(v) <= 16,
    ),
    SignupRule(
        field="password",
        description="Password must contain an uppercase letter",
        check=lambda v: _UPPER.search(v) is not None,
    ),
    SignupRule(
        field="password",
        description="Password must contain a special character",
        check=lambda v: _SPECIAL.search(v) is not None,
    ),
)

# Placeholder text per field
SIGNUP_HINTS: dict[str, str] = {
    "name": "Full name (20-60 chars)",
    "email": "Email",
    "address": "Address (max 400 chars)",
    "password": "Password (8-16, 1 uppercase & 1 special)",
}


def check_signup(request: SignupRequest) -> list[str]:
    """
    Return the descriptions of every rule the request breaks.

    An empty list means the request passes all advertised rules.
    """
    values = request.model_dump()
    return [rule.description for rule in SIGNUP_RULES if not rule.check(values[rule.field])]
