"""
Accounts module interface.

Routes depend on IAccountService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.auth.models import Session

from .models import (
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    User,
    UserProfileResponse,
)


@runtime_checkable
class IAccountService(Protocol):
    """Interface for account operations."""

    async def register(self, request: RegisterRequest) -> User:
        """
        Create a new account.

        Raises:
            MissingFieldsError: If name, email or password is missing
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> Session:
        """
        Check credentials and open a new session.

        Raises:
            MissingFieldsError: If email or password is missing
            InvalidCredentialsError: If no account matches
        """
        ...

    async def logout(self, session_key: Optional[str]) -> None:
        """End the session if there is one. Never fails on a bad key."""
        ...

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        """
        Return the user's public profile.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def update_profile(
        self,
        user_id: str,
        request: Optional[UpdateProfileRequest],
    ) -> bool:
        """
        Apply a partial profile update.

        Returns:
            True if anything was written

        Raises:
            UserNotFoundError: If the user no longer exists
            EmptyUpdateError: If the body has no fields
            EmailAlreadyRegisteredError: If the new email is taken
        """
        ...
