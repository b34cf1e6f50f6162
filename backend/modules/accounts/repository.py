"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
The email column carries a unique index.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    All methods return Pydantic models with proper mapping from database rows.
    """

    table = "users"

    def create(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateKeyError: If the email is already stored.
        """
        data = {
            "name": name,
            "email": email,
            "password": password_hash,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(self._db.table(self.table).insert(data))
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None."""
        result = self._execute(
            self._db.table(self.table).select("*").eq("id", user_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact email match, or None."""
        result = self._execute(
            self._db.table(self.table).select("*").eq("email", email).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> None:
        """
        Update columns of a user.

        Raises:
            DuplicateKeyError: If a new email collides with another user.
        """
        self._execute(self._db.table(self.table).update(data).eq("id", user_id))

    def ping(self) -> bool:
        """Cheap round trip used by the readiness probe."""
        self._execute(self._db.table(self.table).select("id").limit(1))
        return True

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password=data["password"],
            created_at=data.get("created_at"),
            updated_at=data["updated_at"],
        )
