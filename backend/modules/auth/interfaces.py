"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and fakes.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Session


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for session operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def create_session(self, user_id: str) -> Session:
        """
        Start a new session for a user.

        Existing sessions of the same user are left untouched.

        Args:
            user_id: ID of the user who just logged in

        Returns:
            The stored Session, including its new session key
        """
        ...

    async def validate_session(self, session_key: str) -> AuthenticatedUser:
        """
        Resolve a session key to the user it belongs to.

        Args:
            session_key: Value of the Session-Key header

        Returns:
            AuthenticatedUser with user ID and session key

        Raises:
            AuthenticationError: If the key is missing, unknown or expired
        """
        ...

    async def revoke_session(self, session_key: str) -> bool:
        """
        End a session.

        Args:
            session_key: Session key to delete

        Returns:
            True if a session was deleted, False if none matched
        """
        ...
