"""
Session module interface.

Views and flows depend on ISessionStore rather than the concrete store, so
tests can substitute their own.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from .models import Session, UserProfile

SessionListener = Callable[[Session], None]


@runtime_checkable
class ISessionStore(Protocol):
    """Interface for the session owner."""

    @property
    def session(self) -> Session:
        """The current session snapshot."""
        ...

    @property
    def token(self) -> Optional[str]:
        ...

    @property
    def user(self) -> Optional[UserProfile]:
        ...

    def login(self, token: str, user: UserProfile) -> None:
        """Set token and user together and persist them."""
        ...

    def logout(self) -> None:
        """Clear token and user and delete persisted state."""
        ...

    def require_token(self) -> str:
        """
        Return the current token.

        Raises:
            MissingSessionError: If no session is present
        """
        ...

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a change listener; returns an unsubscribe callable."""
        ...
