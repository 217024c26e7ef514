"""Demo records loaded into a fresh store.

Three projects, two findings on the Wallet API and one ready fix for the
SQL injection finding. Ids are fixed so the dashboard links stay stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from codecraft.constants import (
    DeploymentStatusSummary,
    FixStatus,
    InputType,
    IssueStatus,
    ProjectStatus,
    Severity,
)
from codecraft.models import IssueRecord, LlmFixRecord, ProjectRecord

# First id handed out by the in-memory store after seeding
NEXT_ID_AFTER_SEED = 200


@dataclass(slots=True)
class SampleData:
    projects: list[ProjectRecord]
    issues: list[IssueRecord]
    llm_fixes: list[LlmFixRecord]


def build_sample_data(now: datetime | None = None) -> SampleData:
    """Build the demo records relative to ``now`` (defaults to the current UTC time)."""
    now = now or datetime.now(UTC)

    projects = [
        ProjectRecord(
            id=1,
            name="Wallet API",
            input_type=InputType.GIT,
            sonar_project_key="wallet_api",
            status=ProjectStatus.SCAN_COMPLETED,
            last_scan=now - timedelta(hours=2),
            fix_percentage=75,
            deployment_status=DeploymentStatusSummary.DEPLOYED,
            description="Payment processing service",
            created_at=now,
            updated_at=now,
        ),
        ProjectRecord(
            id=2,
            name="User Management API",
            input_type=InputType.GIT,
            sonar_project_key="user_mgmt_api",
            status=ProjectStatus.SCANNING,
            last_scan=now - timedelta(days=1),
            fix_percentage=45,
            deployment_status=DeploymentStatusSummary.PENDING,
            description="Authentication service",
            created_at=now,
            updated_at=now,
        ),
        ProjectRecord(
            id=3,
            name="Analytics Dashboard",
            input_type=InputType.UPLOAD,
            sonar_project_key="analytics_dashboard",
            status=ProjectStatus.SCAN_COMPLETED,
            last_scan=now - timedelta(hours=3),
            fix_percentage=92,
            deployment_status=DeploymentStatusSummary.DEPLOYED,
            description="Reporting and metrics",
            created_at=now,
            updated_at=now,
        ),
    ]

    issues = [
        IssueRecord(
            id=101,
            project_id=1,
            file_path="src/api/user.py",
            line_start=23,
            line_end=30,
            severity=Severity.HIGH,
            vuln_type="SQL Injection",
            message="Unsanitized input used in SQL query",
            code_snippet='db.execute(f"SELECT * FROM users WHERE id={user_id}")',
            status=IssueStatus.PENDING,
            tags=["security", "database"],
            created_at=now,
        ),
        IssueRecord(
            id=102,
            project_id=1,
            file_path="src/api/auth.py",
            line_start=45,
            line_end=52,
            severity=Severity.CRITICAL,
            vuln_type="XSS",
            message="Unescaped user input in HTML response",
            code_snippet='return f"<p>Welcome {username}</p>"',
            status=IssueStatus.FIXED,
            tags=["security", "xss"],
            created_at=now,
        ),
    ]

    llm_fixes = [
        LlmFixRecord(
            id=1,
            project_id=1,
            issue_id=101,
            function_name="get_user",
            llm_response=(
                "Sanitized user_id to prevent SQL Injection by using parameterized "
                "queries and input validation."
            ),
            original_code=(
                "def get_user(user_id):\n"
                '    query = f"SELECT * FROM users WHERE id={user_id}"\n'
                "    return db.execute(query)"
            ),
            fixed_code=(
                "def get_user(user_id):\n"
                "    if not isinstance(user_id, int):\n"
                '        raise ValueError("Invalid user ID")\n'
                '    query = "SELECT * FROM users WHERE id=?"\n'
                "    return db.execute(query, (user_id,))"
            ),
            status=FixStatus.FIX_READY,
            created_at=now - timedelta(hours=2),
        ),
    ]

    return SampleData(projects=projects, issues=issues, llm_fixes=llm_fixes)
