"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations. Route handlers get
their stores and services from here, never from module globals.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import IAccountService
    from modules.accounts.repository import UserRepository
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import SessionRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._session_repository: "SessionRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._account_service: "IAccountService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.accounts.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def session_repository(self) -> "SessionRepository":
        """Get the session repository instance."""
        if self._session_repository is None:
            from modules.auth.repository import SessionRepository
            from shared.database import get_supabase_client
            self._session_repository = SessionRepository(get_supabase_client())
        return self._session_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            settings = get_settings()
            self._auth_service = AuthService(
                sessions=self.session_repository,
                session_ttl=timedelta(days=settings.session_ttl_days),
                enforce_expiry=settings.enforce_session_expiry,
            )
        return self._auth_service

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            settings = get_settings()
            self._account_service = AccountService(
                users=self.user_repository,
                auth=self.auth,
                password_rounds=settings.bcrypt_rounds,
                reject_empty_updates=settings.reject_empty_profile_update,
            )
        return self._account_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._session_repository = None
        self._auth_service = None
        self._account_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_user_repository() -> "UserRepository":
    """FastAPI dependency for user repository."""
    return get_container().user_repository
