"""
grossapp_api/schemas/products.py

Pydantic models for the "products" HTTP API.

Prices are decimal currency amounts with two decimal places. They are
serialized as strings in JSON (e.g. ``"9.99"``) so no precision is lost.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from .common import APIModel

# Upper bound of the 32-bit INTEGER column backing ``quantity``.
MAX_QUANTITY = 2**31 - 1


class ProductCreate(APIModel):
    """
    Payload for creating a new product.

    ``admin_id`` must reference an existing admin.
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(default=None)
    image: Optional[str] = Field(
        default=None,
        max_length=2048,
        description="Image URL or path.",
    )
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, description="Units in stock.")
    admin_id: UUID = Field(..., description="Owning admin.")


class ProductUpdate(APIModel):
    """
    Partial update payload.

    All fields are optional; only provided ones are patched. Sending
    ``admin_id`` transfers ownership to another (existing) admin.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, max_length=2048)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    quantity: Optional[int] = Field(default=None, ge=0, le=MAX_QUANTITY)
    admin_id: Optional[UUID] = None


class ProductRead(APIModel):
    product_id: UUID
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    price: Decimal
    quantity: int
    admin_id: UUID


__all__ = ["MAX_QUANTITY", "ProductCreate", "ProductUpdate", "ProductRead"]
