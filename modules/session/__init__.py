"""
Session module.

Holds the current auth token and user profile and persists them.

Public API:
- ISessionStore: Interface for session owners
- SessionStore: Key-value backed implementation
- Session, UserProfile, Role: Models
- Session exceptions: MissingSessionError, InvalidSessionError, SessionPersistError
"""

from .interfaces import ISessionStore, SessionListener
from .models import ANONYMOUS, Role, Session, UserProfile
from .exceptions import InvalidSessionError, MissingSessionError, SessionPersistError
from .service import SessionStore, TOKEN_KEY, USER_KEY

__all__ = [
    # Interface
    "ISessionStore",
    "SessionListener",
    # Models
    "ANONYMOUS",
    "Role",
    "Session",
    "UserProfile",
    # Exceptions
    "InvalidSessionError",
    "MissingSessionError",
    "SessionPersistError",
    # Service
    "SessionStore",
    "TOKEN_KEY",
    "USER_KEY",
]
