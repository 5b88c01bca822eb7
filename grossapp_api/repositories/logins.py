# grossapp_api/repositories/logins.py

from __future__ import annotations

from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class LoginsRepository:
    """
    Thin data-access layer around the Login model.

    Password hashing happens in the service layer; this class only ever sees
    ``password_hash``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_logins(self) -> Sequence[models.Login]:
        stmt = select(models.Login).order_by(models.Login.username)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_username(self, username: str) -> Optional[models.Login]:
        return self.session.get(models.Login, username)

    def get_by_user_id(self, user_id: UUID) -> Optional[models.Login]:
        stmt = select(models.Login).where(models.Login.user_id == user_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def create(self, *, username: str, user_id: UUID, password_hash: str) -> models.Login:
        login = models.Login(
            username=username,
            user_id=user_id,
            password_hash=password_hash,
        )
        self.session.add(login)
        self.session.flush()
        return login

    def update_fields(self, login: models.Login, *, fields: dict[str, Any]) -> models.Login:
        for key, value in fields.items():
            if hasattr(login, key):
                setattr(login, key, value)

        self.session.add(login)
        self.session.flush()
        return login

    def delete(self, login: models.Login) -> None:
        self.session.delete(login)
        self.session.flush()
