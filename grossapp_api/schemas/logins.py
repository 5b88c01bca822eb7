"""
grossapp_api/schemas/logins.py

Pydantic models for the "logins" HTTP API.

The password is write-only: it is accepted on create/update and never
returned.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import Field

from .common import APIModel

# Letters, digits and "_ . @ -" only, so a username is always one path segment.
USERNAME_PATTERN = r"^[A-Za-z0-9_.@-]+$"


class LoginCreate(APIModel):
    username: str = Field(
        ...,
        min_length=1,
        max_length=150,
        pattern=USERNAME_PATTERN,
        description="Unique login name; used as the URL path segment.",
    )
    user_id: UUID = Field(..., description="Admin this login belongs to.")
    password: str = Field(..., min_length=1, max_length=128)


class LoginUpdate(APIModel):
    """
    Partial update payload. The username is the identity and cannot change.
    """

    user_id: Optional[UUID] = None
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)


class LoginRead(APIModel):
    username: str
    user_id: UUID


__all__ = ["USERNAME_PATTERN", "LoginCreate", "LoginUpdate", "LoginRead"]
