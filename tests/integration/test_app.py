"""Application-level behaviour: root route, error envelope, docs, health."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.shopfront.api.http.app import app
from src.shopfront.core.services import DbSessionService
from src.shopfront.entities.core.user import UserRepository


def test_root(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"hello": "world"}


class TestErrorEnvelope:
    def test_unknown_route(self, client: TestClient):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"code": "not_found", "message": "Not Found"}

    def test_wrong_method(self, client: TestClient):
        response = client.patch("/users")

        assert response.status_code == 405
        assert response.json()["code"] == "method_not_allowed"

    def test_malformed_json(self, client: TestClient):
        response = client.post(
            "/user",
            content=b'{"email": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    def test_body_of_wrong_type(self, client: TestClient):
        response = client.post("/user", json=["ada@example.com", "secret"])

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    def test_database_failure(self, client: TestClient, monkeypatch):
        def fail(self):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(UserRepository, "list_all", fail)

        response = client.get("/users")

        assert response.status_code == 500
        assert response.json() == {
            "code": "internal_error",
            "message": "Internal Server Error",
        }

    def test_unexpected_exception(self, monkeypatch):
        def fail(self):
            raise RuntimeError("boom")

        monkeypatch.setattr(UserRepository, "list_all", fail)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/users")

        assert response.status_code == 500
        assert response.json() == {
            "code": "internal_error",
            "message": "Internal Server Error",
        }

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("post", "/user", {}),
            ("put", "/user/5", {"email": "x@example.com"}),
            ("delete", "/user/5", None),
            ("post", "/product", {"slug": "s"}),
            ("get", "/missing", None),
        ],
    )
    def test_errors_carry_only_code_and_message(self, client: TestClient, method, path, body):
        kwargs = {"json": body} if body is not None else {}

        response = client.request(method.upper(), path, **kwargs)

        assert response.status_code >= 400
        assert set(response.json()) == {"code", "message"}


class TestRequestId:
    def test_generated(self, client: TestClient):
        assert client.get("/").headers.get("X-Request-ID")

    def test_echoed(self, client: TestClient):
        response = client.get("/", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"


class TestDocs:
    def test_openapi_metadata(self, client: TestClient):
        schema = client.get("/openapi.json").json()

        assert schema["info"]["title"] == "Test swagger"
        assert schema["info"]["description"] == "Testing the Fastify swagger API"
        assert schema["info"]["version"] == "0.1.0"
        assert schema["externalDocs"] == {
            "url": "https://swagger.io",
            "description": "Find more info here",
        }
        assert schema["components"]["securitySchemes"]["apiKey"] == {
            "type": "apiKey",
            "name": "apiKey",
            "in": "header",
        }

    def test_documents_every_route(self, client: TestClient):
        paths = client.get("/openapi.json").json()["paths"]

        assert {"/", "/users", "/user", "/user/{id}", "/products", "/product"} <= set(paths)
        assert {"put", "delete"} <= set(paths["/user/{id}"])

    def test_interactive_docs(self, client: TestClient):
        assert client.get("/docs").status_code == 200


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "api"}

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "checks": {"database": {"status": "healthy", "type": "sqlite"}},
        }

    def test_not_ready_when_database_down(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
        assert response.json()["checks"]["database"]["status"] == "unhealthy"
