"""
Auth module interface.
"""

from typing import Protocol, runtime_checkable

from modules.session.models import UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for the credentialed flows.

    Failed requests raise RequestFailedError carrying the normalized message.
    """

    async def login(self, email: str, password: str) -> UserProfile:
        """
        Log in and start a session.

        Raises:
            RequestFailedError: If the backend rejects the credentials
        """
        ...

    async def signup(
        self, name: str, email: str, address: str, password: str
    ) -> UserProfile:
        """
        Register and start a session.

        Raises:
            RequestFailedError: If the backend rejects the registration
        """
        ...

    async def change_password(self, old_password: str, new_password: str) -> str:
        """
        Rotate the current user's password.

        Returns:
            A success message

        Raises:
            MissingSessionError: If no session is present
            RequestFailedError: If the backend rejects the change
        """
        ...
