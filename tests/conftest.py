# tests/conftest.py
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from grossapp_api.config import AppEnv, Settings
from grossapp_api.db.session import build_engine, build_session_factory, init_db
from grossapp_api.main import create_app
from grossapp_api.schemas.admins import AdminCreate
from grossapp_api.schemas.products import ProductCreate
from grossapp_api.services import AdminsService, ProductsService

API_PREFIX = "/api"


@pytest.fixture(scope="function")
def settings():
    """Settings for an isolated in-memory database; ignores any local .env file."""
    return Settings(
        _env_file=None,
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL="sqlite://",
        API_PREFIX=API_PREFIX,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(scope="function")
def engine(settings):
    """A fresh in-memory SQLite engine with all tables created."""
    engine = build_engine(settings.DATABASE_URL, settings=settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session(engine):
    factory = build_session_factory(engine)
    db = factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(settings, engine):
    """
    TestClient bound to an app that shares the test engine, so HTTP tests and
    direct session assertions see the same data.
    """
    app = create_app(settings, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin(session):
    """An existing admin created through the service layer."""
    return AdminsService(session).create_admin(AdminCreate(name="Alice"))


@pytest.fixture
def product(session, admin):
    return ProductsService(session).create_product(
        ProductCreate(
            name="Widget",
            price=Decimal("9.99"),
            quantity=5,
            admin_id=admin.admin_id,
        )
    )
