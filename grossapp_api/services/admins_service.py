# grossapp_api/services/admins_service.py

from __future__ import annotations

from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from grossapp_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from grossapp_api.db import models
from grossapp_api.logging import get_logger
from grossapp_api.repositories import AdminsRepository, LoginsRepository, ProductsRepository
from grossapp_api.schemas.admins import AdminCreate, AdminRead, AdminUpdate
from grossapp_api.schemas.logins import LoginRead
from grossapp_api.schemas.products import ProductRead

from .base import ServiceBase

logger = get_logger(__name__)


class AdminsService(ServiceBase):
    """
    High-level service for admins.

    Responsibilities:
    - Existence checks and the delete policy for admins with dependents.
    - Relationship lookups (an admin's products and login).
    - Convert ORM rows to API schemas (`AdminRead`).

    Delete policy: restrict by default. An admin that still owns products
    or a login can only be removed with ``cascade=True``, which deletes
    those dependents in the same transaction.
    """

    entity_name = "Admin"

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._repo = AdminsRepository(session)
        self._products = ProductsRepository(session)
        self._logins = LoginsRepository(session)

    def _get_or_404(self, admin_id: UUID) -> models.Admin:
        admin = self._repo.get_by_id(admin_id)
        if admin is None:
            raise NotFoundError("Admin", admin_id)
        return admin

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_admin(self, payload: AdminCreate) -> AdminRead:
        with self.unit_of_work("create"):
            admin = self._repo.create(name=payload.name)

        logger.info("admin_created", admin_id=str(admin.admin_id))
        return AdminRead.model_validate(admin)

    def get_admin(self, admin_id: UUID) -> AdminRead:
        return AdminRead.model_validate(self._get_or_404(admin_id))

    def list_admins(self) -> List[AdminRead]:
        return [AdminRead.model_validate(a) for a in self._repo.list_admins()]

    def update_admin(self, admin_id: UUID, payload: AdminUpdate) -> AdminRead:
        updates = payload.model_dump(exclude_unset=True)
        if "name" in updates and updates["name"] is None:
            raise ValidationError("name cannot be null.", {"field": "name"})

        with self.unit_of_work("update"):
            admin = self._get_or_404(admin_id)
            if updates:
                self._repo.update(admin, name=updates.get("name"))

        logger.info("admin_updated", admin_id=str(admin_id), fields=sorted(updates))
        return AdminRead.model_validate(admin)

    def delete_admin(self, admin_id: UUID, *, cascade: bool = False) -> None:
        with self.unit_of_work("delete"):
            admin = self._get_or_404(admin_id)

            product_count = self._repo.count_products(admin_id)
            has_login = self._repo.has_login(admin_id)

            if (product_count or has_login) and not cascade:
                raise ConflictError(
                    f"Admin '{admin_id}' still owns {product_count} product(s)"
                    f"{' and a login' if has_login else ''}; "
                    "delete them first or pass cascade=true.",
                    {"products": product_count, "login": has_login},
                )

            removed_products, removed_logins = (0, 0)
            if cascade:
                removed_products, removed_logins = self._repo.delete_dependents(admin_id)

            self._repo.delete(admin)

        logger.info(
            "admin_deleted",
            admin_id=str(admin_id),
            cascade=cascade,
            products_deleted=removed_products,
            logins_deleted=removed_logins,
        )

    # -------------------------------------------------------------------------
    # Relationship lookups
    # -------------------------------------------------------------------------

    def list_products(self, admin_id: UUID) -> List[ProductRead]:
        self._get_or_404(admin_id)
        return [ProductRead.model_validate(p) for p in self._products.list_by_admin(admin_id)]

    def get_login(self, admin_id: UUID) -> LoginRead:
        self._get_or_404(admin_id)
        login = self._logins.get_by_user_id(admin_id)
        if login is None:
            raise NotFoundError("Login for admin", admin_id)
        return LoginRead.model_validate(login)


__all__ = ["AdminsService"]
