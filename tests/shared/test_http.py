"""Tests for shared/http.py."""

import httpx
import pytest

from shared.exceptions import ExternalServiceError
from shared.http import BackendClient


class TestBackendClient:
    @pytest.mark.asyncio
    async def test_resolves_paths_against_base_url(self, backend, client):
        """Request paths should be relative to the base URL."""
        backend.route("GET", "/stores", json_body=[])
        response = await client.get("/stores")
        assert response.status_code == 200
        assert str(backend.requests[0].url) == "http://backend.test/stores"

    @pytest.mark.asyncio
    async def test_attaches_bearer_token(self, backend, client):
        """A token should be sent as a bearer Authorization header."""
        backend.route("GET", "/stores", json_body=[])
        await client.get("/stores", token="abc")
        assert backend.requests[0].headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_no_auth_header_without_token(self, backend, client):
        """Anonymous requests should carry no Authorization header."""
        backend.route("POST", "/auth/login", json_body={})
        await client.post("/auth/login", json={"email": "a"})
        assert "Authorization" not in backend.requests[0].headers

    @pytest.mark.asyncio
    async def test_sends_json_body(self, backend, client):
        """JSON bodies should be encoded with a JSON content type."""
        backend.route("PUT", "/auth/password", status=204)
        await client.put("/auth/password", json={"old_password": "x"})
        request = backend.requests[0]
        assert request.headers["Content-Type"] == "application/json"
        assert b"old_password" in request.content

    @pytest.mark.asyncio
    async def test_returns_error_responses(self, backend, client):
        """Non-2xx responses should be returned, not raised."""
        backend.route("GET", "/admin/users", status=403, json_body={"detail": "Forbidden"})
        response = await client.get("/admin/users")
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_transport_failure_raises_external_service_error(self):
        """A request with no response should raise ExternalServiceError."""
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = BackendClient("http://backend.test", transport=httpx.MockTransport(refuse))
        with pytest.raises(ExternalServiceError) as exc_info:
            await client.get("/stores")
        assert exc_info.value.message == "Request failed: Connection refused"
        assert exc_info.value.service == "backend"

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self, client):
        """Leaving the context should close the underlying client."""
        async with client:
            pass
        assert client._http.is_closed

    @pytest.mark.asyncio
    async def test_decoding_failure_raises_external_service_error(self):
        """A response that cannot be decoded should raise ExternalServiceError too."""
        def garbled(request):
            raise httpx.DecodingError("Malformed gzip stream", request=request)

        client = BackendClient("http://backend.test", transport=httpx.MockTransport(garbled))
        with pytest.raises(ExternalServiceError) as exc_info:
            await client.get("/stores")
        assert exc_info.value.message == "Request failed: Malformed gzip stream"
        assert exc_info.value.code == "TRANSPORT_ERROR"
