"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-process fake backend served through httpx.MockTransport, and factories
for users and sessions.
"""

from typing import Any, Awaitable, Callable, Optional, Union

import httpx
import pytest

from shared.config import Settings, get_settings
from shared.http import BackendClient
from shared.storage import MemoryStore
from modules.session import Role, SessionStore, UserProfile

TEST_BACKEND_URL = "http://backend.test"
TEST_TOKEN = "test-token-123"

Handler = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


class FakeBackend:
    """
    Route table for httpx.MockTransport.

    Unrouted requests get a 404 with a FastAPI-style detail body. Every
    request is recorded in order.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Handler] = {}

    def route(
        self,
        method: str,
        path: str,
        handler: Optional[Handler] = None,
        *,
        status: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Register a handler, or a fixed response, for method + path."""
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if content is not None:
                    return httpx.Response(status, content=content)
                return httpx.Response(status, json=json_body)

        self._routes[(method.upper(), path)] = handler

    def handle(self, request: httpx.Request):
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method.upper() and r.url.path == path
        ]


def make_user(role: Role = Role.USER, **overrides: Any) -> UserProfile:
    data = {
        "id": 1,
        "name": "Test User With A Long Name",
        "email": "test@example.com",
        "address": "1 Test Street",
        "role": role,
    }
    data.update(overrides)
    return UserProfile(**data)


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> BackendClient:
    return BackendClient(TEST_BACKEND_URL, transport=backend.transport())


@pytest.fixture
def storage() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def session(storage: MemoryStore) -> SessionStore:
    """An empty session store."""
    return SessionStore(storage)


@pytest.fixture
def user_session(session: SessionStore) -> SessionStore:
    """A session store logged in as a regular user."""
    session.login(TEST_TOKEN, make_user(Role.USER))
    return session


@pytest.fixture
def admin_session(session: SessionStore) -> SessionStore:
    session.login(TEST_TOKEN, make_user(Role.ADMIN, id=99, name="Administrator Of The Platform"))
    return session


@pytest.fixture
def owner_session(session: SessionStore) -> SessionStore:
    session.login(TEST_TOKEN, make_user(Role.OWNER, id=7))
    return session


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        backend_url=TEST_BACKEND_URL,
        session_file=tmp_path / "session.json",
    )


@pytest.fixture
def user_factory() -> Callable[..., UserProfile]:
    """Factory for UserProfile objects."""
    return make_user


@pytest.fixture
def token() -> str:
    return TEST_TOKEN
