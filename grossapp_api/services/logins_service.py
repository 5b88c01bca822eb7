# grossapp_api/services/logins_service.py

from __future__ import annotations

from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from grossapp_api.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnknownReferenceError,
    ValidationError,
)
from grossapp_api.db import models
from grossapp_api.logging import get_logger
from grossapp_api.repositories import AdminsRepository, LoginsRepository
from grossapp_api.schemas.logins import LoginCreate, LoginRead, LoginUpdate

from .base import ServiceBase
from .passwords import hash_password

logger = get_logger(__name__)


class DuplicateUsernameError(ConflictError):
    """Raised when creating a login whose username is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(
            f"Login with username '{username}' already exists.",
            {"username": username},
        )


class AdminAlreadyHasLoginError(ConflictError):
    """Raised when an admin would end up with a second login."""

    def __init__(self, admin_id: UUID, existing_username: str) -> None:
        super().__init__(
            f"Admin '{admin_id}' already has login '{existing_username}'.",
            {"user_id": str(admin_id), "username": existing_username},
        )


class LoginsService(ServiceBase):
    """
    High-level service for logins.

    Responsibilities:
    - Username uniqueness and the one-login-per-admin rule.
    - Referential integrity of ``user_id``.
    - Hashing passwords before they are persisted.
    """

    entity_name = "Login"

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._repo = LoginsRepository(session)
        self._admins = AdminsRepository(session)

    def _get_or_404(self, username: str) -> models.Login:
        login = self._repo.get_by_username(username)
        if login is None:
            raise NotFoundError("Login", username)
        return login

    def _check_owner(self, user_id: UUID, *, current_username: str | None = None) -> None:
        if not self._admins.exists(user_id):
            raise UnknownReferenceError("user_id", "Admin", user_id)
        existing = self._repo.get_by_user_id(user_id)
        if existing is not None and existing.username != current_username:
            raise AdminAlreadyHasLoginError(user_id, existing.username)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_login(self, payload: LoginCreate) -> LoginRead:
        with self.unit_of_work("create"):
            if self._repo.get_by_username(payload.username) is not None:
                raise DuplicateUsernameError(payload.username)
            self._check_owner(payload.user_id)
            login = self._repo.create(
                username=payload.username,
                user_id=payload.user_id,
                password_hash=hash_password(payload.password),
            )

        logger.info("login_created", username=login.username, user_id=str(login.user_id))
        return LoginRead.model_validate(login)

    def get_login(self, username: str) -> LoginRead:
        return LoginRead.model_validate(self._get_or_404(username))

    def list_logins(self) -> List[LoginRead]:
        return [LoginRead.model_validate(login) for login in self._repo.list_logins()]

    def update_login(self, username: str, payload: LoginUpdate) -> LoginRead:
        updates = payload.model_dump(exclude_unset=True)
        for name in ("user_id", "password"):
            if name in updates and updates[name] is None:
                raise ValidationError(f"{name} cannot be null.", {"field": name})

        with self.unit_of_work("update"):
            login = self._get_or_404(username)
            fields = {}
            if "user_id" in updates and updates["user_id"] != login.user_id:
                self._check_owner(updates["user_id"], current_username=username)
                fields["user_id"] = updates["user_id"]
            if "password" in updates:
                fields["password_hash"] = hash_password(updates["password"])
            if fields:
                self._repo.update_fields(login, fields=fields)

        # Never log the password itself, only which fields changed.
        logger.info("login_updated", username=username, fields=sorted(updates))
        return LoginRead.model_validate(login)

    def delete_login(self, username: str) -> None:
        with self.unit_of_work("delete"):
            self._repo.delete(self._get_or_404(username))

        logger.info("login_deleted", username=username)


__all__ = [
    "LoginsService",
    "DuplicateUsernameError",
    "AdminAlreadyHasLoginError",
]
