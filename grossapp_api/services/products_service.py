# grossapp_api/services/products_service.py

from __future__ import annotations

from typing import Any, List
from uuid import UUID

from sqlalchemy.orm import Session

from grossapp_api.core.exceptions import NotFoundError, UnknownReferenceError, ValidationError
from grossapp_api.db import models
from grossapp_api.logging import get_logger
from grossapp_api.repositories import AdminsRepository, ProductsRepository
from grossapp_api.schemas.products import (
    MAX_QUANTITY,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)

from .base import ServiceBase

logger = get_logger(__name__)

# Columns that must never be set to NULL through an update.
_REQUIRED_FIELDS = ("name", "price", "quantity", "admin_id")


class ProductsService(ServiceBase):
    """
    High-level service for products.

    Enforces that every product belongs to an existing admin and that
    price and quantity are never negative.
    """

    entity_name = "Product"

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._repo = ProductsRepository(session)
        self._admins = AdminsRepository(session)

    def _get_or_404(self, product_id: UUID) -> models.Product:
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def _require_admin(self, admin_id: UUID) -> None:
        if not self._admins.exists(admin_id):
            raise UnknownReferenceError("admin_id", "Admin", admin_id)

    @staticmethod
    def _check_bounds(fields: dict[str, Any]) -> None:
        for name in ("price", "quantity"):
            value = fields.get(name)
            if value is not None and value < 0:
                raise ValidationError(f"{name} must be non-negative.", {"field": name})
        quantity = fields.get("quantity")
        if quantity is not None and quantity > MAX_QUANTITY:
            raise ValidationError(
                f"quantity must not exceed {MAX_QUANTITY}.", {"field": "quantity"}
            )

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_product(self, payload: ProductCreate) -> ProductRead:
        self._check_bounds(payload.model_dump())

        with self.unit_of_work("create"):
            self._require_admin(payload.admin_id)
            product = self._repo.create(
                name=payload.name,
                description=payload.description,
                image=payload.image,
                price=payload.price,
                quantity=payload.quantity,
                admin_id=payload.admin_id,
            )

        logger.info(
            "product_created",
            product_id=str(product.product_id),
            admin_id=str(product.admin_id),
        )
        return ProductRead.model_validate(product)

    def get_product(self, product_id: UUID) -> ProductRead:
        return ProductRead.model_validate(self._get_or_404(product_id))

    def list_products(self) -> List[ProductRead]:
        return [ProductRead.model_validate(p) for p in self._repo.list_products()]

    def update_product(self, product_id: UUID, payload: ProductUpdate) -> ProductRead:
        updates = payload.model_dump(exclude_unset=True)
        for name in _REQUIRED_FIELDS:
            if name in updates and updates[name] is None:
                raise ValidationError(f"{name} cannot be null.", {"field": name})
        self._check_bounds(updates)

        with self.unit_of_work("update"):
            product = self._get_or_404(product_id)
            new_owner = updates.get("admin_id")
            if new_owner is not None and new_owner != product.admin_id:
                self._require_admin(new_owner)
            if updates:
                self._repo.update_fields(product, fields=updates)

        logger.info("product_updated", product_id=str(product_id), fields=sorted(updates))
        return ProductRead.model_validate(product)

    def delete_product(self, product_id: UUID) -> None:
        with self.unit_of_work("delete"):
            self._repo.delete(self._get_or_404(product_id))

        logger.info("product_deleted", product_id=str(product_id))


__all__ = ["ProductsService"]
