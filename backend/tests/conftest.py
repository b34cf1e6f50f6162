"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stand-ins for the Supabase-backed repositories and an app wired
to them through dependency overrides.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_account_service, get_auth_service, reset_container
from modules.accounts.models import User
from modules.accounts.service import AccountService
from modules.auth.models import Session
from modules.auth.service import AuthService
from shared.exceptions import DuplicateKeyError

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository with the same unique email rule."""

    table = "users"

    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    def create(self, name: str, email: str, password_hash: str) -> User:
        if self.get_by_email(email) is not None:
            raise DuplicateKeyError(self.table)
        now = datetime.now(timezone.utc)
        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def update(self, user_id: str, data: dict[str, Any]) -> None:
        user = self.users.get(user_id)
        if user is None:
            return
        other = self.get_by_email(data["email"]) if "email" in data else None
        if other is not None and other.id != user_id:
            raise DuplicateKeyError(self.table)
        self.users[user_id] = User(**{**user.model_dump(), **data})

    def ping(self) -> bool:
        return True


class InMemorySessionRepository:
    """Dict-backed stand-in for SessionRepository keyed by session key."""

    table = "sessions"

    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}

    def create(self, session_key: str, user_id: str, expired_at: datetime) -> Session:
        if session_key in self.sessions:
            raise DuplicateKeyError(self.table)
        session = Session(
            id=str(uuid.uuid4()),
            session_key=session_key,
            user_id=user_id,
            expired_at=expired_at,
            created_at=datetime.now(timezone.utc),
        )
        self.sessions[session_key] = session
        return session

    def get_by_key(self, session_key: str) -> Optional[Session]:
        return self.sessions.get(session_key)

    def delete_by_key(self, session_key: str) -> bool:
        return self.sessions.pop(session_key, None) is not None


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def auth_service(session_repository) -> AuthService:
    return AuthService(sessions=session_repository)


@pytest.fixture
def account_service(user_repository, auth_service) -> AccountService:
    return AccountService(
        users=user_repository,
        auth=auth_service,
        password_rounds=TEST_BCRYPT_ROUNDS,
    )


@pytest.fixture
def app(auth_service, account_service):
    """Create a fresh app wired to the in-memory stores."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_account_service] = lambda: account_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
