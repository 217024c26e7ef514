from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

from codecraft.storage import MemStorage


def _project_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Billing Service",
        "input_type": "GIT",
        "sonar_project_key": "billing_service",
        "status": "SCAN_COMPLETED",
        "deployment_status": "PENDING",
        "description": "Invoices and payouts",
    }
    payload.update(overrides)
    return payload


def test_list_projects_returns_sample_projects(client: TestClient) -> None:
    response = client.get("/api/projects")

    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data] == [
        "Wallet API",
        "User Management API",
        "Analytics Dashboard",
    ]
    assert data[0]["fix_percentage"] == 75
    assert data[2]["input_type"] == "UPLOAD"


def test_get_project(client: TestClient) -> None:
    response = client.get("/api/projects/1")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["sonar_project_key"] == "wallet_api"
    assert data["deployment_status"] == "DEPLOYED"
    assert data["last_scan"] is not None


def test_get_project_not_found(client: TestClient) -> None:
    response = client.get("/api/projects/9999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Project not found"


def test_create_then_fetch_returns_same_fields(client: TestClient) -> None:
    payload = _project_payload(fix_percentage=10)

    created = client.post("/api/projects", json=payload)

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 200
    for key, value in payload.items():
        assert body[key] == value
    assert body["created_at"]
    assert body["updated_at"]

    fetched = client.get(f"/api/projects/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_project_defaults(client: TestClient) -> None:
    payload = _project_payload()
    del payload["description"]

    body = client.post("/api/projects", json=payload).json()

    assert body["fix_percentage"] == 0
    assert body["description"] is None
    assert body["last_scan"] is None


def test_create_project_rejects_bad_enum(client: TestClient) -> None:
    response = client.post("/api/projects", json=_project_payload(input_type="FTP"))
    assert response.status_code == 400


def test_create_project_rejects_out_of_range_fix_percentage(client: TestClient) -> None:
    response = client.post("/api/projects", json=_project_payload(fix_percentage=101))
    assert response.status_code == 400


def test_create_project_rejects_unknown_fields(client: TestClient) -> None:
    response = client.post("/api/projects", json=_project_payload(owner="someone"))
    assert response.status_code == 400


def test_update_project_changes_only_given_fields(
    client: TestClient, mem_storage: MemStorage
) -> None:
    before = mem_storage.get_project(2)
    assert before is not None

    response = client.patch("/api/projects/2", json={"status": "FAILED", "fix_percentage": 50})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "FAILED"
    assert data["fix_percentage"] == 50
    assert data["name"] == "User Management API"

    after = mem_storage.get_project(2)
    assert after is not None
    assert after.updated_at >= before.updated_at
    assert after.status == "FAILED"


def test_update_project_not_found(client: TestClient) -> None:
    response = client.patch("/api/projects/9999", json={"status": "FAILED"})
    assert response.status_code == 404


def test_delete_project_removes_it_and_its_records(
    client: TestClient, mem_storage: MemStorage
) -> None:
    response = client.delete("/api/projects/1")

    assert response.status_code == 204
    assert client.get("/api/projects/1").status_code == 404
    assert mem_storage.get_project_issues(1) == []
    assert mem_storage.get_project_llm_fixes(1) == []
    assert len(client.get("/api/projects").json()) == 2


def test_delete_project_not_found(client: TestClient) -> None:
    assert client.delete("/api/projects/9999").status_code == 404
