from conftest import ADMIN_PASSWORD, create, make_settings

from fastapi.testclient import TestClient

from balance_tracker.main import create_app


def test_admin_login_with_secret(client):
    response = client.post("/api/login", json={"code": ADMIN_PASSWORD, "type": "admin"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "role": "admin"}


def test_admin_login_with_wrong_secret(client):
    for code in ["wrong", ADMIN_PASSWORD.upper(), "", ADMIN_PASSWORD + " "]:
        body = client.post("/api/login", json={"code": code, "type": "admin"}).json()
        assert body == {"success": False, "message": "wrong password"}


def test_admin_login_without_code(client):
    body = client.post("/api/login", json={"type": "admin"}).json()

    assert body["success"] is False


def test_admin_login_disabled_when_secret_unset():
    with TestClient(create_app(make_settings(admin_password=None))) as client:
        assert client.post("/api/login", json={"type": "admin"}).json()["success"] is False
        assert client.post("/api/login", json={"code": "", "type": "admin"}).json()["success"] is False


def test_student_login_returns_name_and_balance(seeded_client):
    body = seeded_client.post("/api/login", json={"code": "103", "type": "student"}).json()

    assert body == {"success": True, "role": "student", "name": "Ariel Mizrahi", "balance": 85}


def test_student_login_accepts_numeric_code(seeded_client):
    body = seeded_client.post("/api/login", json={"code": 101, "type": "student"}).json()

    assert body["success"] is True
    assert body["name"] == "Yossi Cohen"


def test_student_login_unknown_code(client):
    body = client.post("/api/login", json={"code": "999", "type": "student"}).json()

    assert body == {"success": False, "message": "code not found"}


def test_admin_secret_is_not_a_student_code(client):
    body = client.post("/api/login", json={"code": ADMIN_PASSWORD, "type": "student"}).json()

    assert body["success"] is False


def test_login_after_create_returns_created_values(client):
    created = create(client, "204", name="Tamar Katz", balance=42)
    assert created["success"] is True

    body = client.post("/api/login", json={"code": "204", "type": "student"}).json()

    assert body["name"] == "Tamar Katz"
    assert body["balance"] == 42
