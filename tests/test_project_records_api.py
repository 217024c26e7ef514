"""API tests for the per-project child records."""

from __future__ import annotations

from fastapi.testclient import TestClient

from codecraft.storage import MemStorage

ISSUE = {
    "file_path": "src/payments/refund.py",
    "line_start": 10,
    "line_end": 14,
    "severity": "MEDIUM",
    "vuln_type": "Path Traversal",
    "message": "User supplied path joined without normalization",
    "status": "PENDING",
    "tags": ["security", "filesystem"],
}


class TestIssues:
    def test_list_issues_for_sample_project(self, client: TestClient) -> None:
        data = client.get("/api/projects/1/issues").json()

        assert [i["id"] for i in data] == [101, 102]
        assert data[0]["vuln_type"] == "SQL Injection"
        assert data[1]["severity"] == "CRITICAL"
        assert data[0]["tags"] == ["security", "database"]

    def test_issues_for_nonexistent_project_is_empty(self, client: TestClient) -> None:
        response = client.get("/api/projects/9999/issues")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_issue_uses_path_project(self, client: TestClient) -> None:
        response = client.post("/api/projects/3/issues", json={**ISSUE, "project_id": 1})

        assert response.status_code == 201
        issue = response.json()
        assert issue["project_id"] == 3
        assert issue["code_snippet"] is None
        listed = client.get("/api/projects/3/issues").json()
        assert [i["id"] for i in listed] == [issue["id"]]

    def test_create_issue_rejects_invalid_data(self, client: TestClient) -> None:
        response = client.post("/api/projects/1/issues", json={**ISSUE, "severity": "SEVERE"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid issue data"

    def test_create_issue_for_unknown_project(self, client: TestClient) -> None:
        response = client.post("/api/projects/9999/issues", json=ISSUE)
        assert response.status_code == 404

    def test_issue_status_can_move_backwards(self, client: TestClient) -> None:
        response = client.patch("/api/projects/1/issues/102", json={"status": "PENDING"})

        assert response.status_code == 200
        assert response.json()["status"] == "PENDING"

    def test_update_issue_of_other_project_is_not_found(self, client: TestClient) -> None:
        response = client.patch("/api/projects/2/issues/101", json={"status": "FIXED"})
        assert response.status_code == 404


class TestFunctionBlocks:
    def test_create_and_list(self, client: TestClient) -> None:
        payload = {
            "file_path": "src/api/user.py",
            "function_name": "get_user",
            "line_start": 20,
            "line_end": 32,
            "block_type": "function",
            "code_snippet": "def get_user(user_id): ...",
        }

        created = client.post("/api/projects/1/function_blocks", json=payload)

        assert created.status_code == 201
        listed = client.get("/api/projects/1/function_blocks").json()
        assert len(listed) == 1
        assert listed[0]["function_name"] == "get_user"
        assert listed[0]["project_id"] == 1

    def test_missing_field_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/projects/1/function_blocks", json={"file_path": "a.py"})
        assert response.status_code == 400


class TestLlmFixes:
    def test_list_sample_fix(self, client: TestClient) -> None:
        fixes = client.get("/api/projects/1/llm_fixes").json()

        assert len(fixes) == 1
        assert fixes[0]["issue_id"] == 101
        assert fixes[0]["status"] == "FIX_READY"

    def test_create_fix(self, client: TestClient) -> None:
        payload = {
            "issue_id": 102,
            "function_name": "welcome",
            "llm_response": "Escaped the username before rendering.",
            "original_code": 'return f"<p>Welcome {username}</p>"',
            "fixed_code": 'return f"<p>Welcome {escape(username)}</p>"',
            "status": "FIX_READY",
        }

        response = client.post("/api/projects/1/llm_fixes", json=payload)

        assert response.status_code == 201
        assert response.json()["function_name"] == "welcome"
        assert len(client.get("/api/projects/1/llm_fixes").json()) == 2

    def test_updating_fix_status_persists(
        self, client: TestClient, mem_storage: MemStorage
    ) -> None:
        response = client.patch("/api/projects/1/llm_fixes/1", json={"status": "REJECTED"})

        assert response.status_code == 200
        assert response.json()["status"] == "REJECTED"
        stored = mem_storage.get_llm_fix(1)
        assert stored is not None
        assert stored.status == "REJECTED"
        assert client.get("/api/projects/1/llm_fixes").json()[0]["status"] == "REJECTED"

    def test_update_unknown_fix(self, client: TestClient) -> None:
        response = client.patch("/api/projects/1/llm_fixes/9999", json={"status": "APPLIED"})
        assert response.status_code == 404


class TestGitCommits:
    def test_create_and_list(self, client: TestClient) -> None:
        payload = {
            "commit_hash": "9f1c2ab",
            "author": "ci-bot",
            "message": "Apply parameterized query fix",
            "committed_at": "2026-10-01T12:00:00Z",
        }

        created = client.post("/api/projects/1/git_commits", json=payload)

        assert created.status_code == 201
        commits = client.get("/api/projects/1/git_commits").json()
        assert [c["commit_hash"] for c in commits] == ["9f1c2ab"]

    def test_empty_for_project_without_commits(self, client: TestClient) -> None:
        assert client.get("/api/projects/2/git_commits").json() == []


class TestDeployments:
    def test_deployment_without_prior_scan(self, client: TestClient) -> None:
        payload = {"environment": "PRODUCTION", "status": "DEPLOYED"}

        response = client.post("/api/projects/3/deployments", json=payload)

        assert response.status_code == 201
        deployment = response.json()
        assert deployment["scan_id"] is None
        assert deployment["environment"] == "PRODUCTION"

    def test_update_deployment_status(self, client: TestClient) -> None:
        created = client.post(
            "/api/projects/3/deployments", json={"environment": "STAGING", "status": "DEPLOYING"}
        ).json()

        response = client.patch(
            f"/api/projects/3/deployments/{created['id']}", json={"status": "FAILED"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "FAILED"

    def test_update_deployment_of_other_project(self, client: TestClient) -> None:
        created = client.post(
            "/api/projects/3/deployments", json={"environment": "STAGING", "status": "DEPLOYING"}
        ).json()

        response = client.patch(
            f"/api/projects/1/deployments/{created['id']}", json={"status": "FAILED"}
        )

        assert response.status_code == 404


class TestHistory:
    def test_history_is_empty_initially(self, client: TestClient) -> None:
        assert client.get("/api/history").json() == []
        assert client.get("/api/projects/1/history").json() == []

    def test_project_history_is_filtered(self, client: TestClient) -> None:
        client.post("/api/projects/1/fix", json={})
        client.post("/api/projects/2/rescan", json={})

        project_rows = client.get("/api/projects/1/history").json()
        all_rows = client.get("/api/history").json()

        assert [r["action_type"] for r in project_rows] == ["FIX"]
        assert [r["project_id"] for r in all_rows] == [2, 1]
