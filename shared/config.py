"""
Centralized configuration for the storerate client.

All settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "storerate"
    app_version: str = "0.1.0"
    debug: bool = False

    # Backend
    backend_url: str = "http://localhost:8000"
    request_timeout: float = 30.0  # seconds

    # Session persistence
    session_file: Path = Path.home() / ".storerate" / "session.json"

    # Logging
    log_level: str = "WARNING"

    # Feature Flags
    signup_precheck: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
