"""
Form state for the auth flows.

Each form holds its field values plus one message line for the rendering
layer. Submitting clears the previous message first.
"""

from shared.exceptions import StoreRateError

from .interfaces import IAuthService
from .models import SignupRequest
from .validation import SIGNUP_HINTS, check_signup


class LoginForm:
    def __init__(self, auth: IAuthService):
        self._auth = auth
        self.email = ""
        self.password = ""
        self.error = ""

    async def submit(self) -> bool:
        """Run the login flow; returns True when a session was started."""
        self.error = ""
        try:
            await self._auth.login(self.email, self.password)
        except StoreRateError as e:
            self.error = e.message
            return False
        return True


class SignupForm:
    """
    Signup form state.

    Constraint hints are always available. With precheck enabled, rule
    violations are shown instead of submitting; otherwise the backend
    decides.
    """

    def __init__(self, auth: IAuthService, precheck: bool = False):
        self._auth = auth
        self._precheck = precheck
        self.name = ""
        self.email = ""
        self.address = ""
        self.password = ""
        self.error = ""

    @property
    def hints(self) -> dict[str, str]:
        return dict(SIGNUP_HINTS)

    def violations(self) -> list[str]:
        return check_signup(
            SignupRequest(
                name=self.name,
                email=self.email,
                address=self.address,
                password=self.password,
            )
        )

    async def submit(self) -> bool:
        """Run the signup flow; returns True when a session was started."""
        self.error = ""
        if self._precheck:
            problems = self.violations()
            if problems:
                self.error = "; ".join(problems)
                return False
        try:
            await self._auth.signup(self.name, self.email, self.address, self.password)
        except StoreRateError as e:
            self.error = e.message
            return False
        return True


class ChangePasswordForm:
    def __init__(self, auth: IAuthService):
        self._auth = auth
        self.old_password = ""
        self.new_password = ""
        self.message = ""

    async def submit(self) -> bool:
        """Run the change-password flow; message holds the outcome either way."""
        self.message = ""
        try:
            self.message = await self._auth.change_password(
                self.old_password, self.new_password
            )
        except StoreRateError as e:
            self.message = e.message
            return False
        return True
