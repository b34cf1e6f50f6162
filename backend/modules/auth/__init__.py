"""
Authentication module.

Handles session keys, the session gate and password credentials.

Public API:
- IAuthService: Interface for session operations
- Session: A stored login
- Credential helpers: hash_password, verify_password, generate_session_key
- Auth exceptions: MissingSessionKeyError, InvalidSessionError, etc.
"""

from .interfaces import IAuthService
from .models import Session
from .credentials import (
    hash_password,
    verify_password,
    needs_rehash,
    generate_session_key,
)
from .exceptions import (
    MissingSessionKeyError,
    InvalidSessionError,
    ExpiredSessionError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "Session",
    # Credentials
    "hash_password",
    "verify_password",
    "needs_rehash",
    "generate_session_key",
    # Exceptions
    "MissingSessionKeyError",
    "InvalidSessionError",
    "ExpiredSessionError",
    "UserNotFoundError",
]
