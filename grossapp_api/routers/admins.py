# grossapp_api/routers/admins.py

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from grossapp_api.db.session import get_db
from grossapp_api.schemas.admins import AdminCreate, AdminRead, AdminUpdate
from grossapp_api.schemas.common import (
    CONFLICT_RESPONSE,
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
)
from grossapp_api.schemas.logins import LoginRead
from grossapp_api.schemas.products import ProductRead
from grossapp_api.services.admins_service import AdminsService

router = APIRouter(prefix="/admins", tags=["admins"])


def get_admins_service(session: Session = Depends(get_db)) -> AdminsService:
    """
    Dependency-injected factory for AdminsService (one per request).
    """
    return AdminsService(session)


@router.get(
    "",
    response_model=List[AdminRead],
    summary="List admins",
)
def list_admins(
    *,
    service: AdminsService = Depends(get_admins_service),
) -> List[AdminRead]:
    return service.list_admins()


@router.post(
    "",
    response_model=AdminRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an admin",
    description="Create a new admin. The admin_id is generated by the server.",
    responses={**VALIDATION_RESPONSE},
)
def create_admin(
    *,
    payload: AdminCreate,
    service: AdminsService = Depends(get_admins_service),
) -> AdminRead:
    return service.create_admin(payload)


@router.get(
    "/{admin_id}",
    response_model=AdminRead,
    summary="Get a single admin",
    responses={**NOT_FOUND_RESPONSE},
)
def get_admin(
    *,
    admin_id: UUID,
    service: AdminsService = Depends(get_admins_service),
) -> AdminRead:
    return service.get_admin(admin_id)


@router.put(
    "/{admin_id}",
    response_model=AdminRead,
    summary="Update an admin",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_admin(
    *,
    admin_id: UUID,
    payload: AdminUpdate,
    service: AdminsService = Depends(get_admins_service),
) -> AdminRead:
    return service.update_admin(admin_id, payload)


@router.delete(
    "/{admin_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an admin",
    description=(
        "Delete an admin. Fails with 409 while the admin still owns products "
        "or a login, unless cascade=true is passed, in which case those are "
        "deleted as well."
    ),
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
)
def delete_admin(
    *,
    admin_id: UUID,
    cascade: bool = Query(
        False,
        description="Also delete the admin's products and login.",
    ),
    service: AdminsService = Depends(get_admins_service),
) -> None:
    service.delete_admin(admin_id, cascade=cascade)


@router.get(
    "/{admin_id}/products",
    response_model=List[ProductRead],
    summary="List an admin's products",
    responses={**NOT_FOUND_RESPONSE},
)
def list_admin_products(
    *,
    admin_id: UUID,
    service: AdminsService = Depends(get_admins_service),
) -> List[ProductRead]:
    return service.list_products(admin_id)


@router.get(
    "/{admin_id}/login",
    response_model=LoginRead,
    summary="Get an admin's login",
    responses={**NOT_FOUND_RESPONSE},
)
def get_admin_login(
    *,
    admin_id: UUID,
    service: AdminsService = Depends(get_admins_service),
) -> LoginRead:
    return service.get_login(admin_id)
