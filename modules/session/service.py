"""
Session store implementation.

Owns the current token/user pair and keeps it in a durable key-value store.
Every login/logout is written through immediately.
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from shared.storage import IKeyValueStore

from .exceptions import InvalidSessionError, MissingSessionError, SessionPersistError
from .interfaces import SessionListener
from .models import ANONYMOUS, Session, UserProfile

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionStore:
    """
    Session owner backed by a key-value store.

    The token is stored as plain text and the user as JSON. Construction
    restores whatever was persisted; a half-present or unreadable pair is
    treated as no session and purged.
    """

    def __init__(self, storage: IKeyValueStore):
        self._storage = storage
        self._listeners: list[SessionListener] = []
        self._session = self._restore()

    def _restore(self) -> Session:
        token = self._storage.get(TOKEN_KEY)
        raw_user = self._storage.get(USER_KEY)

        if token is None and raw_user is None:
            return ANONYMOUS

        if not token or raw_user is None:
            logger.warning("Discarding incomplete persisted session")
            self._purge()
            return ANONYMOUS

        try:
            user = UserProfile.model_validate_json(raw_user)
        except PydanticValidationError:
            logger.warning("Discarding persisted session with unreadable user")
            self._purge()
            return ANONYMOUS

        logger.debug(f"Restored session for {user.email}")
        return Session(token=token, user=user)

    def _purge(self) -> None:
        try:
            self._storage.delete(TOKEN_KEY)
            self._storage.delete(USER_KEY)
        except OSError as e:
            logger.warning(f"Could not remove persisted session: {e}")

    @property
    def session(self) -> Session:
        return self._session

    @property
    def token(self) -> Optional[str]:
        return self._session.token

    @property
    def user(self) -> Optional[UserProfile]:
        return self._session.user

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def login(self, token: str, user: UserProfile) -> None:
        """
        Set token and user together and persist both.

        Both keys go to storage in one write. If that write fails, any
        previous session is dropped as well so memory and storage agree.

        Raises:
            InvalidSessionError: If token is empty or user is missing
            SessionPersistError: If storage rejected the write
        """
        if not token or user is None:
            raise InvalidSessionError()

        try:
            self._storage.set_many({TOKEN_KEY: token, USER_KEY: user.model_dump_json()})
        except OSError as e:
            logger.error(f"Persisting session for {user.email} failed: {e}")
            was_authenticated = self._session.is_authenticated
            self._purge()
            self._session = ANONYMOUS
            if was_authenticated:
                self._notify()
            raise SessionPersistError(str(e) or e.__class__.__name__) from e

        self._session = Session(token=token, user=user)
        logger.info(f"Logged in as {user.email} ({user.role.value})")
        self._notify()

    def logout(self) -> None:
        """Clear the session and delete the persisted state."""
        self._purge()
        self._session = ANONYMOUS
        logger.info("Logged out")
        self._notify()

    def require_token(self) -> str:
        if self._session.token is None:
            raise MissingSessionError()
        return self._session.token

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._session)
