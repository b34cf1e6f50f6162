"""
Session repository for database access.

Encapsulates all Supabase queries and data mapping for the sessions table.
The session_key column carries a unique index.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Session


class SessionRepository(BaseRepository[Session]):
    """
    Repository for session data access.

    Note: This repository does NOT check expiry.
    The service layer decides what an expired session means.
    """

    table = "sessions"

    def create(self, session_key: str, user_id: str, expired_at: datetime) -> Session:
        """
        Insert a new session.

        Args:
            session_key: Freshly generated session key.
            user_id: Owning user's ID.
            expired_at: Expiry timestamp.

        Returns:
            The stored Session.

        Raises:
            DuplicateKeyError: If the session key is already in use.
        """
        data = {
            "session_key": session_key,
            "user_id": user_id,
            "expired_at": expired_at.isoformat(),
        }
        result = self._execute(self._db.table(self.table).insert(data))
        return self._map_to_session(result.data[0])

    def get_by_key(self, session_key: str) -> Optional[Session]:
        """
        Look up a session by its key.

        Returns:
            Session if found, None otherwise.
        """
        result = self._execute(
            self._db.table(self.table)
            .select("*")
            .eq("session_key", session_key)
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_session(result.data[0])

    def delete_by_key(self, session_key: str) -> bool:
        """
        Delete a session by its key.

        Returns:
            True if a row was deleted.
        """
        result = self._execute(
            self._db.table(self.table).delete().eq("session_key", session_key)
        )
        return bool(result.data)

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        """Map database row to Session model."""
        return Session(
            id=str(data["id"]) if data.get("id") is not None else None,
            session_key=data["session_key"],
            user_id=str(data["user_id"]),
            expired_at=data["expired_at"],
            created_at=data.get("created_at"),
        )
