"""
Supabase client for the accounts store.

Every repository shares one service-role client per process. The client
is built on first use so that importing the app never needs credentials.
"""

from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from .config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """
    Return the process-wide service-role client.

    The users and sessions tables are written by this backend alone, so
    the service role is used and row level security does not apply.

    Raises:
        RuntimeError: SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset.
    """
    settings = get_settings()
    if not (settings.supabase_url and settings.supabase_service_role_key):
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(postgrest_client_timeout=settings.store_timeout_seconds),
    )


def reset_client_cache() -> None:
    """Drop the cached client; the next call builds a new one."""
    get_supabase_client.cache_clear()
