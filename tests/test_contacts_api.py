"""HTTP-level behaviour of the contact endpoints."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from phonebook_api.app.main import create_app

REQUIRED = {"error": "Name and phone are required."}
NOT_FOUND = {"error": "Contact not found."}


def create(client, **body):
    response = client.post("/contacts", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_service_info(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "service": "phonebook-api", "db": "phonebook.db"}


def test_fresh_store_is_seeded(client):
    contacts = client.get("/contacts").json()
    assert [c["name"] for c in contacts] == ["Marine Azulay", "Ron Levi"]
    assert contacts[1]["phone"] == "050-111-2233"
    assert contacts[1]["email"] == "ron@example.com"


def test_restart_does_not_reseed(db_path):
    with TestClient(create_app(db_path=db_path)) as first:
        seeded = first.get("/contacts").json()
    with TestClient(create_app(db_path=db_path)) as second:
        assert second.get("/contacts").json() == seeded


def test_list_is_idempotent(client):
    assert client.get("/contacts").json() == client.get("/contacts").json()


def test_create_round_trip(client):
    created = create(client, name="A", phone="1")
    assert created["email"] == ""
    assert set(created) == {"id", "name", "phone", "email"}
    assert client.get(f"/contacts/{created['id']}").json() == created
    assert created in client.get("/contacts").json()


def test_list_ordered_by_name(client):
    create(client, name="Zed", phone="1")
    create(client, name="Amy", phone="2")
    names = [c["name"] for c in client.get("/contacts").json()]
    assert names.index("Amy") < names.index("Zed")
    assert names == sorted(names)


def test_email_is_not_validated(client):
    created = create(client, name="A", phone="1", email="not an address")
    assert created["email"] == "not an address"


def test_null_email_defaults_to_empty(client):
    assert create(client, name="A", phone="1", email=None)["email"] == ""


def test_numeric_phone_stored_as_text(client):
    assert create(client, name="A", phone=5551234)["phone"] == "5551234"


@pytest.mark.parametrize(
    "body",
    [
        {"phone": "1"},
        {"name": "A"},
        {"name": "", "phone": "1"},
        {"name": "A", "phone": None},
        {"name": "A", "phone": 0},
        {},
    ],
)
def test_create_requires_name_and_phone(client, body):
    before = len(client.get("/contacts").json())
    response = client.post("/contacts", json=body)
    assert response.status_code == 400
    assert response.json() == REQUIRED
    assert len(client.get("/contacts").json()) == before


@pytest.mark.parametrize("content", [b"", b"{not json", b"[1, 2]", b'"text"'])
def test_create_with_unusable_body(client, content):
    response = client.post("/contacts", content=content, headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == REQUIRED


def test_create_rejects_structured_email(client):
    response = client.post("/contacts", json={"name": "A", "phone": "1", "email": {"x": 1}})
    assert response.status_code == 400
    assert response.json() == {"error": "Email must be a string."}


def test_get_missing_contact(client):
    response = client.get("/contacts/does-not-exist")
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_update(client):
    created = create(client, name="A", phone="1", email="a@x")
    response = client.put(f"/contacts/{created['id']}", json={"name": "B", "phone": "2"})
    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "name": "B", "phone": "2", "email": ""}
    assert client.get(f"/contacts/{created['id']}").json() == response.json()


def test_update_ignores_id_in_body(client):
    created = create(client, name="A", phone="1")
    response = client.put(f"/contacts/{created['id']}", json={"id": "other", "name": "B", "phone": "2"})
    assert response.json()["id"] == created["id"]


def test_update_missing_contact(client):
    before = len(client.get("/contacts").json())
    response = client.put("/contacts/does-not-exist", json={"name": "A", "phone": "1"})
    assert response.status_code == 404
    assert response.json() == NOT_FOUND
    assert len(client.get("/contacts").json()) == before


def test_update_validates_before_lookup(client):
    response = client.put("/contacts/does-not-exist", json={"name": "A"})
    assert response.status_code == 400
    assert response.json() == REQUIRED


def test_update_invalid_body_leaves_row_untouched(client):
    created = create(client, name="A", phone="1")
    response = client.put(f"/contacts/{created['id']}", json={"phone": "2"})
    assert response.status_code == 400
    assert client.get(f"/contacts/{created['id']}").json() == created


def test_delete_then_delete_again(client):
    created = create(client, name="A", phone="1")
    first = client.delete(f"/contacts/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""
    second = client.delete(f"/contacts/{created['id']}")
    assert second.status_code == 404
    assert second.json() == NOT_FOUND
    assert created not in client.get("/contacts").json()


def test_cors_headers(client):
    response = client.get("/contacts", headers={"Origin": "http://192.168.1.20:8081"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_storage_failure_returns_500(db_path):
    app = create_app(db_path=db_path)
    with TestClient(app, raise_server_exceptions=False) as client:
        other = sqlite3.connect(db_path)
        try:
            other.execute("DROP TABLE contacts")
            other.commit()
        finally:
            other.close()
        response = client.post("/contacts", json={"name": "A", "phone": "1"})
        assert response.status_code == 500
