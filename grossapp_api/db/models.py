# grossapp_api/db/models.py

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


# Precision of Product.price: up to 10 integer digits, 2 decimal places.
PRICE_PRECISION = 12
PRICE_SCALE = 2


# ---------------------------------------------------------------------------
# Admins
# ---------------------------------------------------------------------------


class Admin(Base):
    """
    Store administrator. Owns products and (at most) one login.

    Ownership is expressed only through foreign keys on the dependent
    tables; related rows are fetched with explicit queries in the
    repositories.
    """

    __tablename__ = "admins"

    admin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin admin_id={self.admin_id!s} name={self.name!r}>"


# ---------------------------------------------------------------------------
# Logins
# ---------------------------------------------------------------------------


class Login(Base):
    """
    Credentials for an Admin. The Admin-Login relationship is 1:1, hence the
    unique constraint on ``user_id``.
    """

    __tablename__ = "logins"

    username: Mapped[str] = mapped_column(String(150), primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("admins.admin_id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Login username={self.username!r} user_id={self.user_id!s}>"


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Image URL or path; stored as-is.
    image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_PRECISION, PRICE_SCALE, asdecimal=True),
        nullable=False,
        default=Decimal("0.00"),
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    admin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("admins.admin_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<Product product_id={self.product_id!s} name={self.name!r} "
            f"admin_id={self.admin_id!s}>"
        )


__all__ = ["Base", "Admin", "Login", "Product", "PRICE_PRECISION", "PRICE_SCALE"]
