"""
Shared infrastructure for the storerate client.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- http: Backend transport (httpx)
- storage: Durable key-value stores
- exceptions: Base exception classes

Note: View and session logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .http import BackendClient
from .storage import IKeyValueStore, MemoryStore, JsonFileStore
from .exceptions import (
    StoreRateError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)

__all__ = [
    "Settings",
    "get_settings",
    "BackendClient",
    "IKeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "StoreRateError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
]
