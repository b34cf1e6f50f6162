"""
Base exception classes for the Accounts backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class AccountsError(Exception):
    """
    Base exception for all Accounts errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(AccountsError):
    """Resource not found."""

    pass


class ValidationError(AccountsError):
    """Input validation failed."""

    pass


class ConflictError(AccountsError):
    """A uniqueness constraint would be violated."""

    pass


class AuthenticationError(AccountsError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(AccountsError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """The backing store failed or could not be reached."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, service="supabase", code="STORE_ERROR", details=details)


class DuplicateKeyError(ConflictError):
    """The store rejected a write because of a unique index."""

    def __init__(self, table: str, message: str = "Duplicate key"):
        super().__init__(
            f"{message} in table '{table}'",
            code="DUPLICATE_KEY",
            details={"table": table},
        )
        self.table = table
