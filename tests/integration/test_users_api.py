"""End-to-end tests for the user endpoints."""

import bcrypt
import pytest
from fastapi.testclient import TestClient


def _create(client: TestClient, email: str = "ada@example.com", password: str = "analytical"):
    return client.post("/user", json={"email": email, "password": password})


def _users(client: TestClient) -> list[dict]:
    response = client.get("/users")
    assert response.status_code == 200
    return response.json()


class TestListUsers:
    def test_empty(self, client: TestClient):
        assert _users(client) == []

    def test_lists_in_creation_order(self, client: TestClient):
        _create(client, "first@example.com")
        _create(client, "second@example.com")

        assert [u["email"] for u in _users(client)] == [
            "first@example.com",
            "second@example.com",
        ]

    def test_password_is_stored_as_bcrypt_hash(self, client: TestClient):
        _create(client, password="analytical")

        (user,) = _users(client)
        assert user["password"] != "analytical"
        assert user["password"].startswith("$2")
        assert bcrypt.checkpw(b"analytical", user["password"].encode())

    def test_record_shape(self, client: TestClient):
        _create(client)

        (user,) = _users(client)
        assert user["id"] == 1
        assert user["firstName"] is None
        assert user["lastName"] is None
        assert {"created_at", "updated_at"} <= set(user)


class TestCreateUser:
    def test_created(self, client: TestClient):
        response = _create(client)

        assert response.status_code == 201
        assert response.json() == {
            "message": "The user ada@example.com was created successfully"
        }

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({}, "The e-mail field is required"),
            ({"password": "x"}, "The e-mail field is required"),
            ({"email": "", "password": "x"}, "The e-mail field is required"),
            ({"email": "ada@example.com"}, "The password field is required"),
            ({"email": "ada@example.com", "password": ""}, "The password field is required"),
        ],
    )
    def test_missing_fields(self, client: TestClient, body, message):
        response = client.post("/user", json=body)

        assert response.status_code == 400
        assert response.json() == {"code": "validation_error", "message": message}
        assert _users(client) == []

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({"password": 0}, "The e-mail field is required"),
            ({"email": 0, "password": "x"}, "The e-mail field is required"),
            ({"email": "ada@example.com", "password": 0}, "The password field is required"),
        ],
    )
    def test_falsy_values_of_any_type_are_missing(self, client: TestClient, body, message):
        response = client.post("/user", json=body)

        assert response.status_code == 400
        assert response.json() == {"code": "validation_error", "message": message}

    def test_non_string_password(self, client: TestClient):
        response = client.post("/user", json={"email": "ada@example.com", "password": 12345})

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"
        assert response.json()["message"].startswith("Invalid request: password")
        assert _users(client) == []

    def test_no_body(self, client: TestClient):
        response = client.post("/user")

        assert response.status_code == 400
        assert response.json()["message"] == "The e-mail field is required"

    def test_duplicate_email(self, client: TestClient):
        _create(client, password="one")
        response = _create(client, password="two")

        assert response.status_code == 409
        assert response.json() == {
            "code": "conflict",
            "message": "A user with e-mail ada@example.com already exists",
        }
        assert len(_users(client)) == 1


class TestUpdateUser:
    def test_updates_email(self, client: TestClient):
        _create(client)

        response = client.put("/user/1", json={"email": "lovelace@example.com"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["email"] == "lovelace@example.com"
        assert "firstName" in body
        assert _users(client)[0]["email"] == "lovelace@example.com"

    def test_password_unchanged_by_update(self, client: TestClient):
        _create(client)
        before = _users(client)[0]["password"]

        client.put("/user/1", json={"email": "lovelace@example.com"})

        assert _users(client)[0]["password"] == before

    def test_unknown_id(self, client: TestClient):
        response = client.put("/user/99", json={"email": "x@example.com"})

        assert response.status_code == 404
        assert response.json() == {"code": "not_found", "message": "User not found"}

    def test_unknown_id_wins_over_missing_email(self, client: TestClient):
        response = client.put("/user/99", json={})

        assert response.status_code == 404

    def test_non_numeric_id(self, client: TestClient):
        _create(client)

        response = client.put("/user/abc", json={"email": "x@example.com"})

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_leading_integer_id(self, client: TestClient):
        _create(client)

        response = client.put("/user/1abc", json={"email": "x@example.com"})

        assert response.status_code == 200
        assert response.json()["email"] == "x@example.com"

    @pytest.mark.parametrize("body", [{}, {"email": ""}, {"email": None}])
    def test_missing_email_leaves_record(self, client: TestClient, body):
        _create(client)

        response = client.put("/user/1", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "code": "validation_error",
            "message": "The e-mail field is required",
        }
        assert _users(client)[0]["email"] == "ada@example.com"

    def test_email_taken_by_another_user(self, client: TestClient):
        _create(client, "first@example.com")
        _create(client, "second@example.com")

        response = client.put("/user/2", json={"email": "first@example.com"})

        assert response.status_code == 409
        assert response.json()["code"] == "conflict"
        assert [u["email"] for u in _users(client)] == [
            "first@example.com",
            "second@example.com",
        ]


class TestDeleteUser:
    def test_deletes(self, client: TestClient):
        _create(client)

        response = client.delete("/user/1")

        assert response.status_code == 200
        assert response.json() == {
            "message": "The user ada@example.com was deleted successfully"
        }
        assert _users(client) == []

    def test_second_delete_is_not_found(self, client: TestClient):
        _create(client)
        client.delete("/user/1")

        response = client.delete("/user/1")

        assert response.status_code == 404
        assert response.json() == {"code": "not_found", "message": "User not found"}

    def test_non_numeric_id(self, client: TestClient):
        response = client.delete("/user/abc")

        assert response.status_code == 404

    def test_email_reusable_after_delete(self, client: TestClient):
        _create(client)
        client.delete("/user/1")

        assert _create(client).status_code == 201
