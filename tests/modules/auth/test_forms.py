"""Tests for the auth form state objects."""

from unittest.mock import AsyncMock

import pytest

from modules.auth import ChangePasswordForm, LoginForm, SignupForm
from modules.errors import RequestFailedError
from modules.session import MissingSessionError


@pytest.fixture
def auth():
    return AsyncMock()


class TestLoginForm:
    @pytest.mark.asyncio
    async def test_submit_success(self, auth):
        """A successful submit should leave no error."""
        form = LoginForm(auth)
        form.email, form.password = "a@example.com", "pw"
        assert await form.submit() is True
        auth.login.assert_awaited_once_with("a@example.com", "pw")
        assert form.error == ""

    @pytest.mark.asyncio
    async def test_submit_failure_shows_message(self, auth):
        """A failed submit should show the normalized message inline."""
        auth.login.side_effect = RequestFailedError("Invalid credentials", status=401)
        form = LoginForm(auth)
        assert await form.submit() is False
        assert form.error == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_submit_clears_previous_error(self, auth):
        """A new submit should clear the previous error first."""
        form = LoginForm(auth)
        form.error = "old"
        await form.submit()
        assert form.error == ""


class TestSignupForm:
    @pytest.mark.asyncio
    async def test_submits_without_precheck(self, auth):
        """Without precheck, rule violations should not block submission."""
        form = SignupForm(auth)
        form.name, form.email, form.address, form.password = "Al", "a@x.com", "addr", "weak"
        assert await form.submit() is True
        auth.signup.assert_awaited_once_with("Al", "a@x.com", "addr", "weak")

    @pytest.mark.asyncio
    async def test_precheck_blocks_invalid_input(self, auth):
        """With precheck, violations should be shown instead of submitting."""
        form = SignupForm(auth, precheck=True)
        form.name, form.email, form.address, form.password = "Al", "a@x.com", "addr", "weakpass"
        assert await form.submit() is False
        auth.signup.assert_not_awaited()
        assert "Name must be 20-60 characters" in form.error
        assert "Password must contain an uppercase letter" in form.error

    @pytest.mark.asyncio
    async def test_precheck_allows_valid_input(self, auth):
        """With precheck, valid input should be submitted."""
        form = SignupForm(auth, precheck=True)
        form.name = "Alexandra Valid Fullname"
        form.email, form.address, form.password = "a@x.com", "addr", "Secret#12"
        assert await form.submit() is True
        auth.signup.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_backend_error_shown(self, auth):
        """Backend rejections should be shown inline."""
        auth.signup.side_effect = RequestFailedError("Email already registered", status=400)
        form = SignupForm(auth)
        assert await form.submit() is False
        assert form.error == "Email already registered"

    def test_hints(self, auth):
        """Hints should advertise the field constraints."""
        hints = SignupForm(auth).hints
        assert hints["name"] == "Full name (20-60 chars)"
        assert hints["address"] == "Address (max 400 chars)"
        assert hints["password"] == "Password (8-16, 1 uppercase & 1 special)"


class TestChangePasswordForm:
    @pytest.mark.asyncio
    async def test_success_message(self, auth):
        """Success should show the flow's message."""
        auth.change_password.return_value = "Password updated"
        form = ChangePasswordForm(auth)
        form.old_password, form.new_password = "a", "b"
        assert await form.submit() is True
        assert form.message == "Password updated"
        assert form.old_password == "a"

    @pytest.mark.asyncio
    async def test_failure_message(self, auth):
        """Failure should show the normalized error."""
        auth.change_password.side_effect = RequestFailedError("Old password is incorrect", status=400)
        form = ChangePasswordForm(auth)
        assert await form.submit() is False
        assert form.message == "Old password is incorrect"

    @pytest.mark.asyncio
    async def test_missing_session_message(self, auth):
        """A missing session should be reported, not raised."""
        auth.change_password.side_effect = MissingSessionError()
        form = ChangePasswordForm(auth)
        assert await form.submit() is False
        assert form.message == "Authentication required"
