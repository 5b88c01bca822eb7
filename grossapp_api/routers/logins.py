# grossapp_api/routers/logins.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from grossapp_api.db.session import get_db
from grossapp_api.schemas.common import (
    CONFLICT_RESPONSE,
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
)
from grossapp_api.schemas.logins import LoginCreate, LoginRead, LoginUpdate
from grossapp_api.services.logins_service import LoginsService

router = APIRouter(prefix="/logins", tags=["logins"])


def get_logins_service(session: Session = Depends(get_db)) -> LoginsService:
    return LoginsService(session)


@router.get("", response_model=List[LoginRead], summary="List logins")
def list_logins(
    *,
    service: LoginsService = Depends(get_logins_service),
) -> List[LoginRead]:
    return service.list_logins()


@router.post(
    "",
    response_model=LoginRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a login",
    description=(
        "Create the login for an admin. The username is chosen by the caller; "
        "an admin can have at most one login."
    ),
    responses={**VALIDATION_RESPONSE, **CONFLICT_RESPONSE},
)
def create_login(
    *,
    payload: LoginCreate,
    service: LoginsService = Depends(get_logins_service),
) -> LoginRead:
    return service.create_login(payload)


@router.get(
    "/{username}",
    response_model=LoginRead,
    summary="Get a single login",
    responses={**NOT_FOUND_RESPONSE},
)
def get_login(
    *,
    username: str,
    service: LoginsService = Depends(get_logins_service),
) -> LoginRead:
    return service.get_login(username)


@router.put(
    "/{username}",
    response_model=LoginRead,
    summary="Update a login",
    description="Change the password and/or move the login to another admin.",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE, **CONFLICT_RESPONSE},
)
def update_login(
    *,
    username: str,
    payload: LoginUpdate,
    service: LoginsService = Depends(get_logins_service),
) -> LoginRead:
    return service.update_login(username, payload)


@router.delete(
    "/{username}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a login",
    responses={**NOT_FOUND_RESPONSE},
)
def delete_login(
    *,
    username: str,
    service: LoginsService = Depends(get_logins_service),
) -> None:
    service.delete_login(username)
