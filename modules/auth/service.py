"""
Auth flows implementation.

Login and signup feed the session store on success; change-password only
needs the current token and never touches the session.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ExternalServiceError
from shared.http import BackendClient
from modules.errors import RequestFailedError, message_for_exception, raise_for_error
from modules.session.interfaces import ISessionStore
from modules.session.models import UserProfile

from .models import AuthResponse, LoginRequest, PasswordChangeRequest, SignupRequest

logger = logging.getLogger(__name__)

PASSWORD_UPDATED = "Password updated"


class AuthService:
    """
    Implementation of the credentialed request flows.

    Flows are not serialized: a second submission while one is in flight
    simply issues another request.
    """

    def __init__(self, client: BackendClient, session: ISessionStore):
        self._client = client
        self._session = session

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except ExternalServiceError as e:
            raise RequestFailedError(message_for_exception(e)) from e
        await raise_for_error(response)
        return response

    async def _authenticate(self, path: str, body: dict[str, Any]) -> UserProfile:
        response = await self._send("POST", path, json=body)
        try:
            auth = AuthResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            logger.warning(f"Malformed auth response from {path}: {e}")
            raise RequestFailedError(
                "Unexpected response from server", status=response.status_code
            ) from e

        self._session.login(auth.access_token, auth.user)
        return auth.user

    async def login(self, email: str, password: str) -> UserProfile:
        body = LoginRequest(email=email, password=password).model_dump()
        return await self._authenticate("/auth/login", body)

    async def signup(
        self, name: str, email: str, address: str, password: str
    ) -> UserProfile:
        body = SignupRequest(
            name=name, email=email, address=address, password=password
        ).model_dump()
        return await self._authenticate("/auth/signup", body)

    async def change_password(self, old_password: str, new_password: str) -> str:
        token = self._session.require_token()
        body = PasswordChangeRequest(
            old_password=old_password, new_password=new_password
        ).model_dump()
        await self._send("PUT", "/auth/password", token=token, json=body)
        logger.info("Password changed")
        return PASSWORD_UPDATED
