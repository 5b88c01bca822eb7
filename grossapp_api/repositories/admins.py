# grossapp_api/repositories/admins.py

from __future__ import annotations

from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.orm import Session

from ..db import models


class AdminsRepository:
    """
    Thin data-access layer around the Admin model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Admin)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_admins(self) -> Sequence[models.Admin]:
        stmt = self._base_select().order_by(models.Admin.name, models.Admin.admin_id)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_id(self, admin_id: UUID) -> Optional[models.Admin]:
        """
        Fetch a single admin by primary key, or None if it does not exist.
        """
        return self.session.get(models.Admin, admin_id)

    def exists(self, admin_id: UUID) -> bool:
        stmt = select(models.Admin.admin_id).where(models.Admin.admin_id == admin_id)
        return self.session.execute(stmt).first() is not None

    def count_products(self, admin_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(models.Product)
            .where(models.Product.admin_id == admin_id)
        )
        return int(self.session.execute(stmt).scalar_one())

    def has_login(self, admin_id: UUID) -> bool:
        stmt = select(models.Login.username).where(models.Login.user_id == admin_id)
        return self.session.execute(stmt).first() is not None

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, *, name: str) -> models.Admin:
        admin = models.Admin(name=name)
        self.session.add(admin)
        self.session.flush()
        return admin

    def update(self, admin: models.Admin, *, name: Optional[str] = None) -> models.Admin:
        """
        Apply partial updates to an existing Admin and flush.
        """
        if name is not None:
            admin.name = name

        self.session.add(admin)
        self.session.flush()
        return admin

    def delete(self, admin: models.Admin) -> None:
        self.session.delete(admin)
        self.session.flush()

    def delete_dependents(self, admin_id: UUID) -> tuple[int, int]:
        """
        Remove every Product and the Login owned by ``admin_id``.

        Returns ``(products_deleted, logins_deleted)``.
        """
        products = self.session.execute(
            delete(models.Product).where(models.Product.admin_id == admin_id)
        )
        logins = self.session.execute(
            delete(models.Login).where(models.Login.user_id == admin_id)
        )
        self.session.flush()
        return int(products.rowcount or 0), int(logins.rowcount or 0)
