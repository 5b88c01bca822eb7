# grossapp_api/schemas/common.py

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base pydantic model for all HTTP API schemas.

    Common config:
    - forbid extra fields so clients get early feedback on mistakes
      (including attempts to overwrite server-generated identifiers)
    - populate_by_name to make future renames easier
    - from_attributes so ORM rows can be validated directly
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorDetail(APIModel):
    """
    Machine- and human-readable error description.
    """

    code: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'not_found').",
    )
    message: str = Field(
        ...,
        description="Human-readable explanation of the error.",
    )
    details: Optional[Mapping[str, Any]] = Field(
        default=None,
        description="Optional structured details (field errors, ids, etc.).",
    )


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    error: ErrorDetail


# Shared OpenAPI "responses" fragments for routers.
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Not found"}}
VALIDATION_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid payload"}}
CONFLICT_RESPONSE = {409: {"model": ErrorResponse, "description": "Conflict"}}


__all__ = [
    "APIModel",
    "ErrorDetail",
    "ErrorResponse",
    "NOT_FOUND_RESPONSE",
    "VALIDATION_RESPONSE",
    "CONFLICT_RESPONSE",
]
