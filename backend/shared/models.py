"""
Models passed between the API layer and the feature modules.

Anything owned by a single feature belongs in that module's models.py.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticatedUser(BaseModel):
    """The caller behind a live session, as resolved by get_current_user."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="ID of the user owning the session")
    session_key: str = Field(..., description="Session key presented by the client")
