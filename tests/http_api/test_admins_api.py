# tests/http_api/test_admins_api.py

import uuid

from fastapi import status
from fastapi.routing import APIRoute

from grossapp_api.main import app as default_app

API_PREFIX = "/api"


def _create_admin(client, name="Alice"):
    resp = client.post(f"{API_PREFIX}/admins", json={"name": name})
    assert resp.status_code == status.HTTP_201_CREATED, resp.text
    return resp.json()


def _create_product(client, admin_id, name="Widget", price="9.99", quantity=5):
    resp = client.post(
        f"{API_PREFIX}/products",
        json={"name": name, "price": price, "quantity": quantity, "admin_id": admin_id},
    )
    assert resp.status_code == status.HTTP_201_CREATED, resp.text
    return resp.json()


def _create_login(client, admin_id, username="alice"):
    resp = client.post(
        f"{API_PREFIX}/logins",
        json={"username": username, "user_id": admin_id, "password": "s3cret"},
    )
    assert resp.status_code == status.HTTP_201_CREATED, resp.text
    return resp.json()


class TestAdminRoutes:
    def test_routes_registered_and_tagged(self):
        routes = [r for r in default_app.routes if isinstance(r, APIRoute)]
        admin_routes = [r for r in routes if r.path.startswith(f"{API_PREFIX}/admins")]

        assert {r.path for r in admin_routes} >= {
            f"{API_PREFIX}/admins",
            f"{API_PREFIX}/admins/{{admin_id}}",
            f"{API_PREFIX}/admins/{{admin_id}}/products",
            f"{API_PREFIX}/admins/{{admin_id}}/login",
        }
        for route in admin_routes:
            assert "admins" in route.tags

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestAdminCrud:
    def test_create_returns_generated_id(self, client):
        body = _create_admin(client, "Alice")

        assert body["name"] == "Alice"
        assert uuid.UUID(body["admin_id"])

    def test_generated_ids_are_unique(self, client):
        ids = {_create_admin(client, f"Admin {i}")["admin_id"] for i in range(20)}
        assert len(ids) == 20

    def test_round_trip(self, client):
        created = _create_admin(client, "Bob")

        resp = client.get(f"{API_PREFIX}/admins/{created['admin_id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    def test_list(self, client):
        _create_admin(client, "Zed")
        _create_admin(client, "Amy")

        resp = client.get(f"{API_PREFIX}/admins")
        assert resp.status_code == 200
        assert [a["name"] for a in resp.json()] == ["Amy", "Zed"]

    def test_create_requires_name(self, client):
        resp = client.post(f"{API_PREFIX}/admins", json={})

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["error"]["code"] == "validation_error"

    def test_create_rejects_client_supplied_id(self, client):
        resp = client.post(
            f"{API_PREFIX}/admins",
            json={"name": "Eve", "admin_id": str(uuid.uuid4())},
        )
        assert resp.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_unknown_is_404(self, client):
        resp = client.get(f"{API_PREFIX}/admins/{uuid.uuid4()}")

        assert resp.status_code == status.HTTP_404_NOT_FOUND
        error = resp.json()["error"]
        assert error["code"] == "not_found"
        assert error["details"]["entity"] == "Admin"

    def test_malformed_id_is_400(self, client):
        resp = client.get(f"{API_PREFIX}/admins/not-a-uuid")
        assert resp.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_name(self, client):
        created = _create_admin(client, "Alice")

        resp = client.put(
            f"{API_PREFIX}/admins/{created['admin_id']}", json={"name": "Alicia"}
        )
        assert resp.status_code == 200
        assert resp.json() == {"admin_id": created["admin_id"], "name": "Alicia"}

    def test_update_unknown_is_404(self, client):
        resp = client.put(f"{API_PREFIX}/admins/{uuid.uuid4()}", json={"name": "X"})
        assert resp.status_code == status.HTTP_404_NOT_FOUND

    def test_update_null_name_is_400(self, client):
        created = _create_admin(client)
        resp = client.put(f"{API_PREFIX}/admins/{created['admin_id']}", json={"name": None})
        assert resp.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_without_dependents(self, client):
        created = _create_admin(client)

        resp = client.delete(f"{API_PREFIX}/admins/{created['admin_id']}")
        assert resp.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"{API_PREFIX}/admins/{created['admin_id']}").status_code == 404

    def test_delete_unknown_is_404(self, client):
        resp = client.delete(f"{API_PREFIX}/admins/{uuid.uuid4()}")
        assert resp.status_code == status.HTTP_404_NOT_FOUND


class TestAdminDeletePolicy:
    def test_restrict_when_admin_owns_products(self, client):
        admin = _create_admin(client)
        product = _create_product(client, admin["admin_id"])

        resp = client.delete(f"{API_PREFIX}/admins/{admin['admin_id']}")

        assert resp.status_code == status.HTTP_409_CONFLICT
        error = resp.json()["error"]
        assert error["code"] == "conflict"
        assert error["details"] == {"products": 1, "login": False}
        # Nothing was removed.
        assert client.get(f"{API_PREFIX}/admins/{admin['admin_id']}").status_code == 200
        assert client.get(f"{API_PREFIX}/products/{product['product_id']}").status_code == 200

    def test_restrict_when_admin_has_login(self, client):
        admin = _create_admin(client)
        _create_login(client, admin["admin_id"])

        resp = client.delete(f"{API_PREFIX}/admins/{admin['admin_id']}")

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.json()["error"]["details"] == {"products": 0, "login": True}
        assert client.get(f"{API_PREFIX}/logins/alice").status_code == 200

    def test_cascade_removes_products_and_login(self, client):
        admin = _create_admin(client)
        other = _create_admin(client, "Other")
        p1 = _create_product(client, admin["admin_id"], name="A")
        p2 = _create_product(client, admin["admin_id"], name="B")
        kept = _create_product(client, other["admin_id"], name="C")
        _create_login(client, admin["admin_id"])

        resp = client.delete(
            f"{API_PREFIX}/admins/{admin['admin_id']}", params={"cascade": "true"}
        )

        assert resp.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"{API_PREFIX}/admins/{admin['admin_id']}").status_code == 404
        for p in (p1, p2):
            assert client.get(f"{API_PREFIX}/products/{p['product_id']}").status_code == 404
        assert client.get(f"{API_PREFIX}/logins/alice").status_code == 404
        assert client.get(f"{API_PREFIX}/products/{kept['product_id']}").status_code == 200

    def test_cascade_on_admin_without_dependents(self, client):
        admin = _create_admin(client)
        resp = client.delete(
            f"{API_PREFIX}/admins/{admin['admin_id']}", params={"cascade": "true"}
        )
        assert resp.status_code == status.HTTP_204_NO_CONTENT

    def test_restrict_after_dependents_removed(self, client):
        admin = _create_admin(client)
        product = _create_product(client, admin["admin_id"])
        assert client.delete(f"{API_PREFIX}/admins/{admin['admin_id']}").status_code == 409

        client.delete(f"{API_PREFIX}/products/{product['product_id']}")

        assert client.delete(f"{API_PREFIX}/admins/{admin['admin_id']}").status_code == 204


class TestAdminRelations:
    def test_list_admin_products(self, client):
        admin = _create_admin(client)
        other = _create_admin(client, "Other")
        mine = _create_product(client, admin["admin_id"], name="Mine")
        _create_product(client, other["admin_id"], name="Theirs")

        resp = client.get(f"{API_PREFIX}/admins/{admin['admin_id']}/products")

        assert resp.status_code == 200
        assert resp.json() == [mine]

    def test_list_products_of_unknown_admin_is_404(self, client):
        resp = client.get(f"{API_PREFIX}/admins/{uuid.uuid4()}/products")
        assert resp.status_code == 404

    def test_get_admin_login(self, client):
        admin = _create_admin(client)
        login = _create_login(client, admin["admin_id"])

        resp = client.get(f"{API_PREFIX}/admins/{admin['admin_id']}/login")

        assert resp.status_code == 200
        assert resp.json() == login

    def test_get_missing_admin_login_is_404(self, client):
        admin = _create_admin(client)
        resp = client.get(f"{API_PREFIX}/admins/{admin['admin_id']}/login")
        assert resp.status_code == 404
