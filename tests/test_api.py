"""Tests for the Codecraft API application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from codecraft.api.dependencies import get_storage
from codecraft.api.main import app
from codecraft.storage import MemStorage


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["storage"] == "MemStorage"

    def test_health_response_is_json(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.headers["content-type"] == "application/json"


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self) -> None:
        assert app.title == "Codecraft API"

    def test_app_version(self) -> None:
        assert app.version == "0.1.0"

    def test_cors_middleware_is_configured(self) -> None:
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes


class TestErrorResponses:
    """Tests for the uniform error bodies."""

    def test_unknown_route_returns_404(self, client: TestClient) -> None:
        response = client.get("/nonexistent")
        assert response.status_code == 404

    def test_invalid_body_returns_400_with_errors(self, client: TestClient) -> None:
        response = client.post("/api/projects", json={"name": "Missing fields"})
        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid request data"
        assert any("input_type" in error["loc"] for error in data["errors"])

    def test_non_integer_path_parameter_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/projects/abc")
        assert response.status_code == 400

    def test_unexpected_failure_returns_500(self) -> None:
        class BrokenStorage(MemStorage):
            def get_projects(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_storage] = lambda: BrokenStorage()
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/api/projects")
        finally:
            app.dependency_overrides.pop(get_storage, None)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


@pytest.mark.parametrize(
    "path",
    [
        "/api/projects",
        "/api/projects/1/issues",
        "/api/projects/1/function_blocks",
        "/api/projects/1/llm_fixes",
        "/api/projects/1/git_commits",
        "/api/projects/1/deployments",
        "/api/projects/1/history",
        "/api/history",
        "/api/stats",
    ],
)
def test_read_endpoints_respond(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 200


def test_error_body_is_documented(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    failure = schema["paths"]["/api/projects"]["get"]["responses"]["500"]
    assert failure["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
