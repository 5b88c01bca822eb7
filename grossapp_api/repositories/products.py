# grossapp_api/repositories/products.py

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..db import models


class ProductsRepository:
    """
    Thin data-access layer around the Product model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Product).order_by(
            models.Product.name, models.Product.product_id
        )

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_products(self) -> Sequence[models.Product]:
        return list(self.session.execute(self._base_select()).scalars().all())

    def list_by_admin(self, admin_id: UUID) -> Sequence[models.Product]:
        """
        Products owned by a given admin (query-time join on the foreign key).
        """
        stmt = self._base_select().where(models.Product.admin_id == admin_id)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_id(self, product_id: UUID) -> Optional[models.Product]:
        return self.session.get(models.Product, product_id)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        name: str,
        admin_id: UUID,
        price: Decimal,
        quantity: int,
        description: Optional[str] = None,
        image: Optional[str] = None,
    ) -> models.Product:
        product = models.Product(
            name=name,
            description=description,
            image=image,
            price=price,
            quantity=quantity,
            admin_id=admin_id,
        )
        self.session.add(product)
        self.session.flush()
        return product

    def update_fields(self, product: models.Product, *, fields: dict[str, Any]) -> models.Product:
        """
        Apply the given column updates and flush. Unknown keys are ignored.
        """
        for key, value in fields.items():
            if hasattr(product, key):
                setattr(product, key, value)

        self.session.add(product)
        self.session.flush()
        return product

    def delete(self, product: models.Product) -> None:
        self.session.delete(product)
        self.session.flush()
