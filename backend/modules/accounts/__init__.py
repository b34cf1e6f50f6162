"""
Accounts module.

Handles registration, login/logout and profile management.

Public API:
- IAccountService: Interface for account operations
- User: A stored account
- Request/response models for the account endpoints
"""

from .interfaces import IAccountService
from .models import (
    User,
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    UpdateProfileRequest,
    UserProfileResponse,
)
from .exceptions import (
    MissingFieldsError,
    EmptyUpdateError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "IAccountService",
    # Models
    "User",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UpdateProfileRequest",
    "UserProfileResponse",
    # Exceptions
    "MissingFieldsError",
    "EmptyUpdateError",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
]
