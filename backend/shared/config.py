"""
Settings shared by the service layer and the migration runner.

Read from the environment (or a .env file) once per process. Server
options such as host, port and CORS live in api.config instead.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store, session and password settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Accounts API"
    app_version: str = "0.1.0"

    # Store
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, run_migrations.py only
    store_timeout_seconds: float = Field(10.0, gt=0)

    # Sessions live this long after login
    session_ttl_days: int = Field(7, ge=1)
    enforce_session_expiry: bool = True

    # bcrypt accepts 4..31
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    reject_empty_profile_update: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
