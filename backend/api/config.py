"""
API configuration using Pydantic Settings.

Loads configuration from environment variables with sensible defaults.
Store and session settings live in shared.config.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["critical", "error", "warning", "info", "debug"]


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ACCOUNTS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False
    log_level: LogLevel = "info"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Upper bound on the time spent serving one request
    request_timeout: float = Field(30.0, gt=0)  # seconds


def get_settings() -> APISettings:
    """Get settings instance."""
    return APISettings()
