# tests/http_api/test_app.py

import asyncio
import time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from grossapp_api.config import AppEnv, Settings, get_config, set_config
from grossapp_api.core.exceptions import ConflictError
from grossapp_api.db import models
from grossapp_api.main import create_app


def _settings(**overrides):
    values = dict(
        _env_file=None,
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL="sqlite://",
        LOG_LEVEL="WARNING",
    )
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    @pytest.mark.parametrize(
        "prefix, expected",
        [("/api", "/api"), ("api/", "/api"), ("", ""), ("/", ""), ("/v1/admin/", "/v1/admin")],
    )
    def test_api_root_normalized(self, prefix, expected):
        assert _settings(API_PREFIX=prefix).api_root == expected

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("GROSSAPP_REQUEST_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("GROSSAPP_DATABASE_URL", "postgresql+psycopg://u:p@db/grossapp")

        settings = Settings(_env_file=None)

        assert settings.REQUEST_TIMEOUT_SECONDS == 2.5
        assert not settings.is_sqlite

    def test_set_config_replaces_singleton(self):
        original = get_config()
        replacement = _settings(APP_NAME="replaced")
        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original)


class TestAppWiring:
    def test_custom_prefix(self, engine):
        app = create_app(_settings(API_PREFIX="/v2"), engine=engine)
        with TestClient(app) as client:
            assert client.get("/v2/admins").status_code == 200
            assert client.get("/api/admins").status_code == 404

    def test_request_timeout_returns_504(self, engine):
        app = create_app(_settings(REQUEST_TIMEOUT_SECONDS=0.05), engine=engine)

        @app.get("/slow")
        async def slow():
            await asyncio.sleep(1)
            return {"done": True}

        with TestClient(app) as client:
            resp = client.get("/slow")

        assert resp.status_code == 504
        assert resp.json()["error"]["code"] == "timeout"

    def test_timed_out_write_is_not_committed(self, engine, session, admin, monkeypatch):
        def slow_hash(password):
            time.sleep(0.4)
            return "hashed"

        monkeypatch.setattr("grossapp_api.services.logins_service.hash_password", slow_hash)
        app = create_app(_settings(REQUEST_TIMEOUT_SECONDS=0.1), engine=engine)

        with TestClient(app) as client:
            resp = client.post(
                "/api/logins",
                json={"username": "late", "user_id": str(admin.admin_id), "password": "pw"},
            )
            # Let the worker thread run past its deadline check.
            time.sleep(0.6)
            saved = session.execute(select(models.Login)).scalars().all()

        assert resp.status_code == 504
        assert resp.json()["error"]["code"] == "timeout"
        assert saved == []

    def test_domain_errors_use_error_envelope(self, engine):
        app = create_app(_settings(), engine=engine)

        @app.get("/boom")
        async def boom():
            raise ConflictError("already there", {"key": "value"})

        with TestClient(app) as client:
            resp = client.get("/boom")

        assert resp.status_code == 409
        assert resp.json() == {
            "error": {
                "code": "conflict",
                "message": "already there",
                "details": {"key": "value"},
            }
        }

    def test_openapi_documents_error_responses(self, client):
        spec = client.get("/openapi.json").json()
        delete_admin = spec["paths"]["/api/admins/{admin_id}"]["delete"]
        assert "409" in delete_admin["responses"]
        assert "404" in delete_admin["responses"]

    def test_unknown_route_uses_error_envelope(self, client):
        resp = client.get("/api/does-not-exist")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "not_found"
        assert "detail" not in resp.json()

    def test_wrong_method_uses_error_envelope(self, client):
        resp = client.post("/health")

        assert resp.status_code == 405
        assert resp.json()["error"]["code"] == "method_not_allowed"
        assert "GET" in resp.headers["allow"]
