"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class Session(BaseModel):
    """
    An active login.

    The session references its user by ID only; removing a user does
    not remove the user's sessions.
    """

    id: Optional[str] = Field(None, description="Row ID")
    session_key: str = Field(..., description="Opaque session key")
    user_id: str = Field(..., description="ID of the owning user")
    expired_at: datetime = Field(..., description="Time after which the session is invalid")
    created_at: Optional[datetime] = Field(None, description="Login time")

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check the session's expiry against now (UTC by default)."""
        now = now or datetime.now(timezone.utc)
        expired_at = self.expired_at
        if expired_at.tzinfo is None:
            expired_at = expired_at.replace(tzinfo=timezone.utc)
        return expired_at <= now
