"""
Session-Key authentication dependencies.

Resolves the Session-Key header to the user owning the session.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from modules.auth.interfaces import IAuthService
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

SESSION_KEY_HEADER = "Session-Key"

# Session key extractor
session_key_scheme = APIKeyHeader(
    name=SESSION_KEY_HEADER,
    auto_error=False,
    description="Session key returned by /login, invalid after /logout.",
)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": SESSION_KEY_HEADER},
        )


async def get_current_user(
    session_key: Optional[str] = Depends(session_key_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a live session.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    try:
        return await auth.validate_session(session_key or "")
    except AuthenticationError as e:
        raise AuthError(e.message)
