"""
Accounts module data models.

Request fields are optional on purpose: a missing field is a business
error (400) reported by the service, not a schema error.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """A stored user account."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, unique and case-sensitive")
    password: str = Field(..., repr=False, description="Password digest")
    created_at: Optional[datetime] = Field(None, description="Registration time")
    updated_at: datetime = Field(..., description="Last profile change")


class RegisterRequest(BaseModel):
    """Body of POST /register."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Body of POST /login."""

    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Successful login."""

    session_key: str = Field(..., description="Send back in the Session-Key header")


class UpdateProfileRequest(BaseModel):
    """
    Body of PATCH /user.

    Every field is independent; omitted or empty fields are left alone.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserProfileResponse(BaseModel):
    """Body of GET /user."""

    name: str
    email: str
    update_at: str = Field(..., description="Last profile change, locale formatted")


def format_locale_timestamp(value: datetime) -> str:
    """
    Format a timestamp as M/D/YYYY, h:mm:ss AM in server local time.

    Naive datetimes are taken to be local already.
    """
    if value.tzinfo is not None:
        value = value.astimezone()
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value.month}/{value.day}/{value.year}, {hour}:{value:%M:%S} {meridiem}"
