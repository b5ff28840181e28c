from fastapi.testclient import TestClient

from inventory_sentinel.database import get_stores
from inventory_sentinel.main import app


def test_health_is_public(anon_client):
    r = anon_client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_data_endpoints_need_login(anon_client):
    for path in ("/api/inventory/", "/api/licenses/", "/api/users/", "/api/dashboard/summary",
                 "/api/scan/ASSET-001"):
        assert anon_client.get(path).status_code == 401, path


def test_login_and_logout(anon_client):
    r = anon_client.post("/api/auth/login", json={"email": "admin@admin.com", "password": "wrong"})
    assert r.status_code == 401
    r = anon_client.post("/api/auth/login", json={"email": "admin@admin.com", "password": "admin"})
    assert r.status_code == 200
    assert r.json()["role"] == "Administrador"
    assert anon_client.get("/api/auth/session").json()["id"] == "USR-006"
    assert anon_client.get("/api/auth/guard", params={"path": "/login"}).json()["redirect_to"] == "/"

    assert anon_client.post("/api/auth/logout").status_code == 204
    assert anon_client.get("/api/inventory/").status_code == 401
    assert anon_client.get("/api/auth/guard", params={"path": "/users"}).json()["redirect_to"] == "/login"


def test_inventory_list_depends_on_role(anon_client):
    anon_client.post("/api/auth/login", json={"email": "bjohnson@example.com", "password": "cambiar123"})
    r = anon_client.get("/api/inventory/")
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == ["ASSET-002", "ASSET-004"]


def test_each_client_has_its_own_session(client):
    other = TestClient(app)
    assert other.get("/api/users/").status_code == 401
    assert other.get("/api/auth/guard", params={"path": "/users"}).json()["redirect_to"] == "/login"

    other.post("/api/auth/login", json={"email": "bjohnson@example.com", "password": "cambiar123"})
    assert len(other.get("/api/inventory/").json()) == 2
    assert len(client.get("/api/inventory/").json()) == 8
    assert client.get("/api/auth/session").json()["role"] == "Administrador"

    assert client.post("/api/auth/logout").status_code == 204
    assert client.get("/api/inventory/").status_code == 401
    assert other.get("/api/auth/session").json()["id"] == "USR-002"


def test_login_with_mixed_case_email(client):
    body = {"name": "Frank Castle", "email": "Frank@Example.COM", "department": "Logística",
            "password": "largaclave"}
    assert client.post("/api/users/", json=body).status_code == 201
    r = client.post("/api/auth/login", json={"email": "Frank@Example.COM", "password": "largaclave"})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Frank Castle"



def test_inventory_crud(client):
    assert len(client.get("/api/inventory/").json()) == 8

    r = client.post("/api/inventory/", json={"name": "Webcam", "type": "Otro", "status": "En Stock",
                                             "barcode": "WEBCAM001", "purchase_date": "2024-06-01"})
    assert r.status_code == 201, r.text
    assert r.json()["id"] == "ASSET-009"
    assert r.json()["purchase_date"] == "2024-06-01"

    r = client.patch("/api/inventory/ASSET-009", json={"notes": "sala de reuniones"})
    assert r.status_code == 200
    assert r.json()["notes"] == "sala de reuniones"
    assert r.json()["name"] == "Webcam"

    r = client.post("/api/inventory/ASSET-009/assign", json={"user_id": "USR-003"})
    assert r.json()["status"] == "Asignado"
    assert r.json()["assigned_to"] == "Charlie Brown (cbrown@example.com)"
    assert [i["id"] for i in client.get("/api/inventory/by-user/USR-003").json()] == ["ASSET-009"]

    assert client.post("/api/inventory/ASSET-009/unassign").json()["status"] == "En Stock"
    assert client.delete("/api/inventory/ASSET-009").status_code == 204
    assert client.get("/api/inventory/ASSET-009").status_code == 404
    assert client.delete("/api/inventory/ASSET-009").status_code == 404


def test_inventory_validation(client):
    base = {"name": "Webcam", "type": "Otro", "status": "En Stock", "barcode": "WEBCAM001"}
    assert client.post("/api/inventory/", json={**base, "barcode": "123"}).status_code == 422
    assert client.post("/api/inventory/", json={**base, "name": "W"}).status_code == 422
    assert client.post("/api/inventory/", json={**base, "type": "Nevera"}).status_code == 422
    assert client.post("/api/inventory/", json={**base, "purchase_date": "ayer"}).status_code == 422
    # assignment requires status Asignado
    assert client.post("/api/inventory/", json={**base, "assigned_to_id": "USR-001"}).status_code == 422
    assert client.patch("/api/inventory/ASSET-001", json={"name": None}).status_code == 422
    assert client.post("/api/inventory/", json={**base, "status": "Asignado",
                                                "assigned_to_id": "USR-404"}).status_code == 404


def test_scan(client):
    assert client.get("/api/scan/123456789012").json()["id"] == "ASSET-001"
    assert client.get("/api/scan/ASSET-002").json()["barcode"] == "987654321098"
    assert client.get("/api/scan/NOPE").status_code == 404


def test_license_endpoints(client):
    r = client.patch("/api/licenses/LIC-004", json={"status": "Activa"})
    assert r.status_code == 200
    assert r.json()["status"] == "Activa"
    assert r.json()["seats"] == 50
    assert client.patch("/api/licenses/LIC-004", json={"seats": None}).status_code == 422
    assert client.patch("/api/licenses/LIC-404", json={"seats": 2}).status_code == 404

    body = {"software_name": "Editor", "license_key": "ED-1", "license_type": "Freeware", "seats": 1}
    assert client.post("/api/licenses/", json=body).status_code == 422
    r = client.post("/api/licenses/", json={**body, "license_key": "ED-12345"})
    assert r.status_code == 201
    assert r.json()["status"] == "Sin Asignar"

    assert client.delete("/api/licenses/LIC-001").status_code == 204
    assert client.get("/api/licenses/LIC-001").status_code == 404
    assert [l["id"] for l in client.get("/api/licenses/", params={"q": "ide"}).json()] == ["LIC-005"]


def test_mobile_line_endpoints(client):
    body = {"phone_number": "abc123456", "carrier": "Digi", "plan_name": "Empresa", "status": "Activa"}
    assert client.post("/api/mobile-lines/", json=body).status_code == 422
    assert client.post("/api/mobile-lines/", json={**body, "phone_number": "6001"}).status_code == 422
    r = client.post("/api/mobile-lines/", json={**body, "phone_number": "+34 (600) 11-22-33",
                                                "assigned_to_user_id": "USR-002"})
    assert r.status_code == 201, r.text
    assert r.json()["assigned_to_user_name"] == "Bob Johnson"
    assert client.patch("/api/mobile-lines/LINE-001", json={"phone_number": "12"}).status_code == 422
    assert client.patch("/api/mobile-lines/LINE-404", json={"notes": "x"}).status_code == 404


def test_order_endpoints(client):
    body = {"order_date": "2024-06-01", "supplier": "Acme", "status": "Comprado", "items": []}
    assert client.post("/api/orders/", json=body).status_code == 422
    bad_item = [{"item_name": "Cable", "quantity": 0, "category": "Otro"}]
    assert client.post("/api/orders/", json={**body, "items": bad_item}).status_code == 422

    r = client.post("/api/orders/", json={**body, "items": [{"item_name": "Cable", "category": "Otro"}]})
    assert r.status_code == 201, r.text
    assert r.json()["items"][0]["id"] == "ITEM-004-100"

    r = client.patch("/api/orders/ORD-001", json={"status": "Recibido", "actual_arrival_date": "2024-05-14"})
    assert r.json()["status"] == "Recibido"
    assert len(r.json()["items"]) == 2
    assert client.patch("/api/orders/ORD-001", json={"items": None}).status_code == 422
    assert client.delete("/api/orders/ORD-404").status_code == 404


def test_entrega_endpoints(client):
    body = {"user_id": "USR-003", "delivery_date": "2024-06-03", "items": [{"item_name": "Cascos"}]}
    r = client.post("/api/entregas/", json=body)
    assert r.status_code == 201, r.text
    assert r.json()["user_name"] == "Charlie Brown"
    assert r.json()["status"] == "Pendiente"
    assert client.post("/api/entregas/", json={**body, "user_id": "USR-404"}).status_code == 404
    assert client.post("/api/entregas/", json={**body, "items": []}).status_code == 422
    assert [e["id"] for e in client.get("/api/entregas/by-user/USR-003").json()] == ["ENT-004"]


def test_user_endpoints(client):
    r = client.get("/api/users/USR-001")
    assert r.status_code == 200
    assert r.json()["assigned_items"] == 2
    assert "password_hash" not in r.json()

    body = {"name": "Frank Castle", "email": "fcastle@example.com", "department": "Logística",
            "password": "corto"}
    assert client.post("/api/users/", json=body).status_code == 422
    assert client.post("/api/users/", json={**body, "password": "largaclave", "email": "no-email"}).status_code == 422
    r = client.post("/api/users/", json={**body, "password": "largaclave"})
    assert r.status_code == 201, r.text
    assert r.json()["id"] == "USR-007"
    assert client.post("/api/users/", json={**body, "password": "largaclave"}).status_code == 409

    r = client.patch("/api/users/USR-002", json={"name": "Robert Johnson", "password": ""})
    assert r.status_code == 200
    assert client.get("/api/inventory/ASSET-003").json()["assigned_to"] == "Robert Johnson (bjohnson@example.com)"
    assert client.patch("/api/users/USR-002", json={"password": "corta"}).status_code == 422

    assert client.patch("/api/users/USR-003/role", json={"role": "Tecnico"}).json()["role"] == "Tecnico"

    assert client.delete("/api/users/USR-001").status_code == 409
    assert client.delete("/api/users/USR-007").status_code == 204
    assert client.delete("/api/users/USR-007").status_code == 404


def test_return_form_endpoint(client):
    r = client.get("/api/users/USR-005/return-form")
    assert r.status_code == 200
    data = r.json()
    assert data["user"]["name"] == "Ethan Hunt"
    assert [i["id"] for i in data["items"]] == ["ASSET-007", "ASSET-008"]
    assert data["mobile_lines"] == []
    assert client.get("/api/users/USR-404/return-form").status_code == 404


def test_dashboard_summary(client):
    r = client.get("/api/dashboard/summary")
    assert r.status_code == 200
    assert r.json()["total_items"] == 8


def test_unexpected_error_returns_500(client):
    def broken_stores():
        raise RuntimeError("boom")

    app.dependency_overrides[get_stores] = broken_stores
    r = client.get("/api/licenses/")
    assert r.status_code == 500
    assert r.json() == {"detail": "internal error"}
