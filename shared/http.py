"""
HTTP transport for the storerate backend.

Wraps a single httpx.AsyncClient bound to the configured base URL. Callers
get raw responses back and decide how to interpret non-2xx statuses.
"""

import logging
from typing import Any, Optional

import httpx

from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class BackendClient:
    """
    Thin async client for the rating backend.

    Attaches JSON bodies and the bearer token, and turns request failures
    (no usable response) into ExternalServiceError.
    """

    SERVICE_NAME = "backend"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the backend client.

        Args:
            base_url: Backend root URL; request paths are relative to it.
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Optional[Any] = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send a request and return the response whatever its status.

        Raises:
            ExternalServiceError: If the request never got a response
        """
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug(f"{method} {path} params={params}")
        try:
            response = await self._http.request(
                method,
                path,
                headers=headers,
                json=json,
                params=params,
            )
        except httpx.RequestError as e:
            reason = str(e) or e.__class__.__name__
            logger.warning(f"{method} {path} failed: {reason}")
            raise ExternalServiceError(
                f"Request failed: {reason}",
                service=self.SERVICE_NAME,
                code="TRANSPORT_ERROR",
            ) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, **kwargs)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
