"""
Application shell.

Wires settings, transport, storage, session, router, the auth forms and the
active role view together, and owns their lifetime. A rendering layer reads
state from here and calls the coroutines.
"""

import logging
from typing import Any, Optional, Union

from shared.config import Settings, get_settings
from shared.http import BackendClient
from shared.storage import IKeyValueStore, JsonFileStore
from modules.admin import AdminDashboard
from modules.auth import AuthService, ChangePasswordForm, LoginForm, SignupForm
from modules.listing import FilterCriteria, SortCriteria
from modules.owner import OwnerDashboardView
from modules.router import RoleRouter, Screen
from modules.session import Session, SessionStore
from modules.stores import StoreListView

logger = logging.getLogger(__name__)

RoleView = Union[AdminDashboard, StoreListView, OwnerDashboardView]


class ClientApp:
    """
    Owns every client component for one process.

    Usage:
        async with ClientApp() as app:
            await app.login_form.submit()
            view = await app.enter()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[BackendClient] = None,
        storage: Optional[IKeyValueStore] = None,
    ):
        """
        Initialize the shell.

        Args:
            settings: Client settings; defaults to get_settings()
            client: Backend transport; defaults to one built from settings
            storage: Session storage; defaults to a JSON file at settings.session_file
        """
        self.settings = settings or get_settings()
        self.client = client or BackendClient(
            self.settings.backend_url,
            timeout=self.settings.request_timeout,
        )
        self.storage = storage if storage is not None else JsonFileStore(self.settings.session_file)
        self.session = SessionStore(self.storage)
        self.auth = AuthService(self.client, self.session)
        self.router = RoleRouter(self.session)

        self.login_form = LoginForm(self.auth)
        self.signup_form = SignupForm(self.auth, precheck=self.settings.signup_precheck)
        self.password_form = ChangePasswordForm(self.auth)

        self._view: Optional[RoleView] = None
        self._view_screen: Optional[Screen] = None
        self._unsubscribe = self.session.subscribe(self._on_session_change)

    @property
    def screen(self) -> Screen:
        return self.router.screen

    def build_view(
        self,
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ) -> Optional[RoleView]:
        """
        Create a fresh view for the current screen, replacing any previous one.

        Returns None before login.
        """
        screen = self.router.screen
        view: Optional[RoleView]
        if screen is Screen.ADMIN:
            view = AdminDashboard(self.client, self.session, filters=filters, sort=sort)
        elif screen is Screen.STORE_LIST:
            view = StoreListView(self.client, self.session, filters=filters, sort=sort)
        elif screen is Screen.OWNER_DASHBOARD:
            view = OwnerDashboardView(self.client, self.session)
        else:
            view = None

        self._view = view
        self._view_screen = screen
        return view

    @property
    def view(self) -> Optional[RoleView]:
        """The view for the current screen, created on first access."""
        if self._view_screen is not self.router.screen:
            return self.build_view()
        return self._view

    async def enter(self) -> Optional[RoleView]:
        """Load the current screen's view; a no-op before login."""
        view = self.view
        if view is not None:
            await view.load()
        return view

    def logout(self) -> None:
        self.router.logout()

    def _on_session_change(self, session: Session) -> None:
        if not session.is_authenticated:
            self._view = None
            self._view_screen = None
            self.password_form = ChangePasswordForm(self.auth)

    async def aclose(self) -> None:
        self._unsubscribe()
        self.router.close()
        await self.client.aclose()

    async def __aenter__(self) -> "ClientApp":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
