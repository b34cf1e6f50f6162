"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses. All of
them map to 401 and deliberately carry no hint of the session key.
"""

from shared.exceptions import AuthenticationError


class MissingSessionKeyError(AuthenticationError):
    """Raised when no session key is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_SESSION_KEY")


class InvalidSessionError(AuthenticationError):
    """Raised when the session key does not match any session."""

    def __init__(
        self,
        message: str = "Session is not recognized",
        code: str = "INVALID_SESSION",
    ):
        super().__init__(message, code=code)


class ExpiredSessionError(InvalidSessionError):
    """Raised when the session exists but its expiry has passed."""

    def __init__(self, message: str = "Session has expired"):
        super().__init__(message, code="SESSION_EXPIRED")


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
