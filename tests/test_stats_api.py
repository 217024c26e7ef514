from __future__ import annotations

from fastapi.testclient import TestClient

from codecraft.storage import MemStorage


def test_stats_for_sample_data(client: TestClient) -> None:
    response = client.get("/api/stats")

    assert response.status_code == 200
    # The sample critical XSS finding is already FIXED and no fix is applied yet
    assert response.json() == {
        "total_projects": 3,
        "critical_issues": 0,
        "fixes_applied": 0,
        "avg_fix_rate": 71,
    }


def test_stats_follow_changes(client: TestClient) -> None:
    client.patch("/api/projects/1/issues/102", json={"status": "PENDING"})
    client.post("/api/projects/1/merge_fix", json={"fix_id": 1})

    data = client.get("/api/stats").json()

    assert data["critical_issues"] == 1
    assert data["fixes_applied"] == 1


def test_stats_with_no_projects(client: TestClient, mem_storage: MemStorage) -> None:
    for project in mem_storage.get_projects():
        mem_storage.delete_project(project.id)

    assert client.get("/api/stats").json() == {
        "total_projects": 0,
        "critical_issues": 0,
        "fixes_applied": 0,
        "avg_fix_rate": 0,
    }
