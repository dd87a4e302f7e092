"""
Role router module.

Public API:
- RoleRouter: Pre-auth toggle and role-based screen selection
- view_for_role: Role -> Screen
- PreAuthMode, Screen: Models
- InvalidTransitionError
"""

from .models import PreAuthMode, Screen
from .exceptions import InvalidTransitionError
from .service import RoleRouter, view_for_role

__all__ = [
    "PreAuthMode",
    "Screen",
    "InvalidTransitionError",
    "RoleRouter",
    "view_for_role",
]
