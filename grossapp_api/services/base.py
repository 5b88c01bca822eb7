# grossapp_api/services/base.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from grossapp_api.core.deadline import check_deadline
from grossapp_api.core.exceptions import ConflictError
from grossapp_api.logging import get_logger

logger = get_logger(__name__)


class ServiceBase:
    """
    Shared transaction handling for the entity services.

    Each public service method is one unit of work: repositories flush,
    the service commits once at the end, and any failure rolls the session
    back before the exception propagates. Nothing is committed once the
    request deadline has passed.
    """

    entity_name = "record"

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    @contextmanager
    def unit_of_work(self, operation: str) -> Iterator[None]:
        try:
            yield
            # A request already answered with a timeout must not commit.
            check_deadline()
            self._session.commit()
        except IntegrityError as exc:
            # A uniqueness/foreign-key race that got past the explicit checks.
            self._session.rollback()
            logger.warning(
                "integrity_error",
                entity=self.entity_name,
                operation=operation,
                error=str(exc.orig),
            )
            raise ConflictError(
                f"{self.entity_name} {operation} violates a database constraint.",
                {"operation": operation},
            ) from exc
        except Exception:
            self._session.rollback()
            raise


__all__ = ["ServiceBase"]
