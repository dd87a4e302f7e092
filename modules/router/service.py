"""
Role router.

Before login the router toggles between the login and signup forms. Once a
session exists the screen is chosen purely by the user's role; the router
trusts the role the backend issued and performs no authorization itself.
"""

import logging

from modules.session.interfaces import ISessionStore
from modules.session.models import Role, Session

from .exceptions import InvalidTransitionError
from .models import PreAuthMode, Screen

logger = logging.getLogger(__name__)

_ROLE_SCREENS = {
    Role.ADMIN: Screen.ADMIN,
    Role.USER: Screen.STORE_LIST,
    Role.OWNER: Screen.OWNER_DASHBOARD,
}


def view_for_role(role: Role) -> Screen:
    """Map a role to its home screen."""
    return _ROLE_SCREENS[Role(role)]


class RoleRouter:
    """
    Screen selection over the session state.

    Any logout, including one made directly on the session store, resets the
    pre-auth mode to LOGIN.
    """

    def __init__(self, session: ISessionStore):
        self._session = session
        self._mode = PreAuthMode.LOGIN
        self._unsubscribe = session.subscribe(self._on_session_change)

    @property
    def mode(self) -> PreAuthMode:
        return self._mode

    @property
    def screen(self) -> Screen:
        user = self._session.user
        if self._session.session.is_authenticated and user is not None:
            return view_for_role(user.role)
        if self._mode is PreAuthMode.SIGNUP:
            return Screen.SIGNUP
        return Screen.LOGIN

    def _require_pre_auth(self, action: str) -> None:
        if self._session.session.is_authenticated:
            raise InvalidTransitionError(action, self.screen.value)

    def switch_to_signup(self) -> None:
        self._require_pre_auth("switch to signup")
        self._mode = PreAuthMode.SIGNUP

    def switch_to_login(self) -> None:
        self._require_pre_auth("switch to login")
        self._mode = PreAuthMode.LOGIN

    def logout(self) -> None:
        self._session.logout()

    def close(self) -> None:
        """Stop listening to the session store."""
        self._unsubscribe()

    def _on_session_change(self, session: Session) -> None:
        if not session.is_authenticated:
            self._mode = PreAuthMode.LOGIN
        logger.debug(f"Screen is now {self.screen.value}")
