# grossapp_api/db/session.py

from __future__ import annotations

from typing import Any, Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from grossapp_api.config import Settings, get_config
from grossapp_api.logging import get_logger

from .models import Base

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: Optional[str] = None, settings: Optional[Settings] = None) -> Engine:
    """
    Create an Engine for ``url`` (defaults to ``settings.DATABASE_URL``).

    - SQLite: ``check_same_thread=False`` and foreign keys enabled on every
      connection. In-memory databases share a single connection (StaticPool)
      so every session sees the same data.
    - Other backends: bounded connection pool (size, overflow, checkout timeout).
    """
    settings = settings or get_config()
    url = url or settings.DATABASE_URL

    kwargs: dict[str, Any] = {"echo": settings.DEBUG, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
        )

    engine = create_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug("engine_created", dialect=engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("database_initialized", tables=sorted(Base.metadata.tables))


# Process-wide defaults, built lazily from configuration.
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker[Session]] = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped session and ensures it
    is closed afterwards.

    The session factory attached to ``app.state`` by ``create_app`` wins over
    the process-wide default.

    Usage:

        @router.get("/admins")
        def list_admins(db: Session = Depends(get_db)):
            ...
    """
    factory = getattr(request.app.state, "session_factory", None) or get_session_factory()
    db = factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "build_engine",
    "build_session_factory",
    "init_db",
    "get_engine",
    "get_session_factory",
    "get_db",
]
