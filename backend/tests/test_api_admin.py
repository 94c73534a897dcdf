import pytest
from fastapi.testclient import TestClient

from app.api.deps_auth import get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models.account import Account
from app.models.role import ROLE_CUSTOMER


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the startup hook would touch the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth(admin_account) -> dict[str, str]:
    token = create_access_token({"sub": str(admin_account.id)})
    return {"Authorization": f"Bearer {token}"}


def test_admin_routes_require_a_token(client: TestClient) -> None:
    response = client.get("/api/admin/rooms")

    assert response.status_code == 401


def test_admin_routes_require_admin_role(client: TestClient, db, roles) -> None:
    customer = Account(
        username="guest",
        email="guest@hotel.test",
        first_name="Gus",
        last_name="Guest",
        password_hash=hash_password("guest-pass"),
        roles=[roles[ROLE_CUSTOMER]],
    )
    db.add(customer)
    db.commit()
    token = create_access_token({"sub": str(customer.id)})

    response = client.get("/api/admin/rooms", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_login_returns_token_for_valid_credentials(client: TestClient, admin_account) -> None:
    response = client.post("/api/auth/login", json={"username": "frontdesk", "password": "frontdesk-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["name"] == "Frida Desk"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.json()["username"] == "frontdesk"


def test_login_rejects_bad_password(client: TestClient, admin_account) -> None:
    response = client.post("/api/auth/login", json={"username": "frontdesk", "password": "nope"})

    assert response.status_code == 401


def test_account_scenario(client: TestClient, auth, roles) -> None:
    created = client.post(
        "/api/admin/users",
        json={
            "username": "jdoe",
            "email": "j@x.com",
            "first_name": "John",
            "last_name": "Doe",
            "password": "pw-123456",
            "role_ids": [roles[ROLE_CUSTOMER].id],
        },
        headers=auth,
    )
    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "User John Doe was created successfully"
    assert body["actor"] == "Frida Desk"
    assert body["user"]["id"] > 0
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]

    duplicate = client.post(
        "/api/admin/users",
        json={
            "username": "jdoe",
            "email": "other@x.com",
            "first_name": "Jane",
            "last_name": "Doe",
            "password": "pw-654321",
        },
        headers=auth,
    )
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"]["code"] == "DuplicateUsername"
    assert duplicate.json()["detail"]["field"] == "username"

    edit_view = client.get("/api/admin/users/jdoe", headers=auth)
    assert edit_view.status_code == 200
    assert "password" not in edit_view.json()

    customers = client.get("/api/admin/customers", headers=auth)
    assert [c["username"] for c in customers.json()] == ["jdoe"]


def test_update_user_keeps_password(client: TestClient, auth, admin_account, db) -> None:
    original_hash = admin_account.password_hash

    response = client.put(
        "/api/admin/users/frontdesk",
        json={"first_name": "Fran", "password": "", "id": 999},
        headers=auth,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "User: frontdesk was updated successfully"
    db.expire_all()
    stored = db.get(Account, admin_account.id)
    assert stored.first_name == "Fran"
    assert stored.password_hash == original_hash


def test_update_user_rejects_null_username(client: TestClient, auth) -> None:
    response = client.put("/api/admin/users/frontdesk", json={"username": None}, headers=auth)

    assert response.status_code == 422


def test_missing_user_is_not_found(client: TestClient, auth) -> None:
    response = client.delete("/api/admin/users/nobody", headers=auth)

    assert response.status_code == 404
    assert response.json()["detail"] == "Requested user: nobody does not exist in database."


def test_room_scenario(client: TestClient, auth, room_types) -> None:
    payload = {"name": "101", "type_id": room_types["Single"].id, "price": 95, "status": "UNVERIFIED"}

    created = client.post("/api/admin/rooms", json=payload, headers=auth)
    assert created.status_code == 201
    assert created.json()["room"]["status"] == "VERIFIED"
    assert created.json()["message"] == "Room 101 was added successfully"
    room_id = created.json()["room"]["id"]

    duplicate = client.post("/api/admin/rooms", json=payload, headers=auth)
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"]["code"] == "DuplicateName"

    taken = client.get("/api/admin/rooms/check", params={"name": "101"}, headers=auth)
    assert taken.text == "Not Available"
    free = client.get("/api/admin/rooms/check", params={"name": "202"}, headers=auth)
    assert free.text == "Available"

    updated = client.put(
        f"/api/admin/rooms/{room_id}",
        json={"name": "101", "description": "Sea view", "price": 1, "capacity": 8},
        headers=auth,
    )
    assert updated.status_code == 200
    room = updated.json()["room"]
    assert room["description"] == "Sea view"
    assert room["price"] == 95
    assert room["capacity"] == 1

    removed = client.delete(f"/api/admin/rooms/{room_id}", headers=auth)
    assert removed.json()["message"] == f"Room No {room_id} was removed successfully."
    assert client.get(f"/api/admin/rooms/{room_id}", headers=auth).status_code == 404


def test_dashboard_summary(client: TestClient, auth) -> None:
    response = client.get("/api/admin/", headers=auth)

    assert response.status_code == 200
    assert response.json() == {
        "username": "Frida Desk",
        "total_customers": 0,
        "total_admins": 1,
        "total_bookings": 0,
        "total_rooms": 0,
    }


def test_edit_views_report_missing_entities(client: TestClient, auth) -> None:
    user = client.get("/api/admin/users/ghost", headers=auth)
    assert user.status_code == 404
    assert user.json()["detail"] == "Requested user: ghost does not exist in database."

    room = client.get("/api/admin/rooms/77", headers=auth)
    assert room.status_code == 404
    assert room.json()["detail"] == "Room with Id 77 does not exist."


def test_create_room_with_unknown_type_is_bad_request(client: TestClient, auth) -> None:
    response = client.post("/api/admin/rooms", json={"name": "303", "type_id": 999}, headers=auth)

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "UnknownReference"
    assert response.json()["detail"]["field"] == "type_id"
