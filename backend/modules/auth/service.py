"""
Authentication service implementation.

Issues opaque session keys at login and resolves them back to a user
on every protected request.
"""

import logging
from datetime import datetime, timedelta, timezone

from fastapi.concurrency import run_in_threadpool

from shared.models import AuthenticatedUser

from .credentials import generate_session_key
from .exceptions import (
    ExpiredSessionError,
    InvalidSessionError,
    MissingSessionKeyError,
)
from .interfaces import IAuthService
from .models import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)


class AuthService(IAuthService):
    """
    Implementation of the session service.

    Sessions live in the sessions table. A user may hold any number
    of sessions at once; logging in never ends an earlier one.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        enforce_expiry: bool = True,
    ):
        self._sessions = sessions
        self._session_ttl = session_ttl
        self._enforce_expiry = enforce_expiry

    async def create_session(self, user_id: str) -> Session:
        """Store a new session with a fresh key and the configured TTL."""
        expired_at = datetime.now(timezone.utc) + self._session_ttl
        session = await run_in_threadpool(
            self._sessions.create,
            generate_session_key(),
            user_id,
            expired_at,
        )
        logger.info("Session created for user %s", user_id)
        return session

    async def validate_session(self, session_key: str) -> AuthenticatedUser:
        """
        Resolve a session key to its user.

        When expiry is enforced, an expired session is deleted on
        sight and reported like an unknown one.
        """
        if not session_key:
            logger.debug("Request without session key rejected")
            raise MissingSessionKeyError()

        session = await run_in_threadpool(self._sessions.get_by_key, session_key)
        if session is None:
            logger.debug("Unrecognized session key rejected")
            raise InvalidSessionError()

        if self._enforce_expiry and session.is_expired():
            await run_in_threadpool(self._sessions.delete_by_key, session_key)
            logger.info("Expired session of user %s removed", session.user_id)
            raise ExpiredSessionError()

        return AuthenticatedUser(id=session.user_id, session_key=session.session_key)

    async def revoke_session(self, session_key: str) -> bool:
        """Delete the session if it exists."""
        deleted = await run_in_threadpool(self._sessions.delete_by_key, session_key)
        if deleted:
            logger.info("Session revoked")
        return deleted
