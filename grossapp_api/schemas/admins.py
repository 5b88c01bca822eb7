"""
grossapp_api/schemas/admins.py

Pydantic models for the "admins" HTTP API.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import Field

from .common import APIModel


class AdminCreate(APIModel):
    """
    Payload for creating a new admin. The identifier is generated server-side.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")


class AdminUpdate(APIModel):
    """
    Partial update payload; only provided fields are patched.
    """

    name: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="New display name.",
    )


class AdminRead(APIModel):
    admin_id: UUID = Field(..., description="Server-generated identifier")
    name: str


__all__ = ["AdminCreate", "AdminUpdate", "AdminRead"]
