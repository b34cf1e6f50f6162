"""
Accounts service implementation.

Orchestrates registration, login/logout and profile access over the
users table and the auth module's session service.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from modules.auth.credentials import (
    BCRYPT_ROUNDS,
    hash_password,
    needs_rehash,
    verify_password,
)
from modules.auth.exceptions import UserNotFoundError
from modules.auth.interfaces import IAuthService
from modules.auth.models import Session
from shared.exceptions import DuplicateKeyError

from .exceptions import (
    EmailAlreadyRegisteredError,
    EmptyUpdateError,
    InvalidCredentialsError,
    MissingFieldsError,
)
from .interfaces import IAccountService
from .models import (
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    User,
    UserProfileResponse,
    format_locale_timestamp,
)
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _missing_fields(request: Any, fields: tuple[str, ...]) -> list[str]:
    return [name for name in fields if not getattr(request, name)]


class AccountService(IAccountService):
    """
    Account service backed by the users table.

    Store calls and bcrypt work run in the thread pool so a slow
    request never stalls the event loop.
    """

    def __init__(
        self,
        users: UserRepository,
        auth: IAuthService,
        password_rounds: int = BCRYPT_ROUNDS,
        reject_empty_updates: bool = True,
    ):
        self._users = users
        self._auth = auth
        self._password_rounds = password_rounds
        self._reject_empty_updates = reject_empty_updates

    async def register(self, request: RegisterRequest) -> User:
        """Create a user after checking the email is free."""
        missing = _missing_fields(request, ("name", "email", "password"))
        if missing:
            raise MissingFieldsError(missing)

        existing = await run_in_threadpool(self._users.get_by_email, request.email)
        if existing is not None:
            logger.info("Registration rejected, email already in use")
            raise EmailAlreadyRegisteredError(request.email)

        password_hash = await self._hash(request.password)
        try:
            user = await run_in_threadpool(
                self._users.create,
                request.name,
                request.email,
                password_hash,
            )
        except DuplicateKeyError:
            # Lost a race with a concurrent registration
            raise EmailAlreadyRegisteredError(request.email)

        logger.info("User registered: %s", user.id)
        return user

    async def login(self, request: LoginRequest) -> Session:
        """Verify credentials and open a new session."""
        missing = _missing_fields(request, ("email", "password"))
        if missing:
            raise MissingFieldsError(missing)

        user = await run_in_threadpool(self._users.get_by_email, request.email)
        if user is None:
            raise InvalidCredentialsError()

        valid = await run_in_threadpool(verify_password, request.password, user.password)
        if not valid:
            raise InvalidCredentialsError()

        if needs_rehash(user.password):
            password_hash = await self._hash(request.password)
            await run_in_threadpool(self._users.update, user.id, {"password": password_hash})
            logger.info("Upgraded legacy password digest for user %s", user.id)

        return await self._auth.create_session(user.id)

    async def logout(self, session_key: Optional[str]) -> None:
        if session_key:
            await self._auth.revoke_session(session_key)

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        user = await self._get_user(user_id)
        return UserProfileResponse(
            name=user.name,
            email=user.email,
            update_at=format_locale_timestamp(user.updated_at),
        )

    async def update_profile(
        self,
        user_id: str,
        request: Optional[UpdateProfileRequest],
    ) -> bool:
        """
        Apply the provided fields.

        The email is only checked and written when it differs from the
        current one. Any applied field bumps updated_at.
        """
        user = await self._get_user(user_id)

        if request is None or not request.model_fields_set:
            if self._reject_empty_updates:
                raise EmptyUpdateError()
            return False

        changes: dict[str, Any] = {}

        if request.email and request.email != user.email:
            other = await run_in_threadpool(self._users.get_by_email, request.email)
            if other is not None:
                logger.info("Email change rejected for user %s, email in use", user.id)
                raise EmailAlreadyRegisteredError(request.email)
            changes["email"] = request.email

        if request.name:
            changes["name"] = request.name

        if request.password:
            changes["password"] = await self._hash(request.password)

        if not changes:
            return False

        changes["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            await run_in_threadpool(self._users.update, user.id, changes)
        except DuplicateKeyError:
            raise EmailAlreadyRegisteredError(request.email or "")

        logger.info("Profile updated for user %s: %s", user.id, sorted(changes))
        return True

    async def _get_user(self, user_id: str) -> User:
        user = await run_in_threadpool(self._users.get_by_id, user_id)
        if user is None:
            logger.info("Session refers to missing user %s", user_id)
            raise UserNotFoundError(user_id)
        return user

    async def _hash(self, password: str) -> str:
        return await run_in_threadpool(hash_password, password, self._password_rounds)
