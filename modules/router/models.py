"""
Router module data models.
"""

from enum import Enum


class PreAuthMode(str, Enum):
    """Which form is shown before a session exists."""

    LOGIN = "login"
    SIGNUP = "signup"


class Screen(str, Enum):
    """The top-level screen currently shown."""

    LOGIN = "login"
    SIGNUP = "signup"
    ADMIN = "admin"
    STORE_LIST = "store_list"
    OWNER_DASHBOARD = "owner_dashboard"
