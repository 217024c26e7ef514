"""Dashboard summary counters."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

from codecraft.constants import FixStatus, IssueStatus, Severity

if TYPE_CHECKING:
    from codecraft.storage import Storage


class DashboardStats(TypedDict):
    total_projects: int
    critical_issues: int
    fixes_applied: int
    avg_fix_rate: int


def compute_dashboard_stats(storage: Storage) -> DashboardStats:
    """Summarize all projects for the dashboard header cards.

    ``critical_issues`` counts open (PENDING) critical findings and
    ``avg_fix_rate`` is the rounded mean of project fix percentages.
    """
    projects = storage.get_projects()
    critical = 0
    applied = 0
    for project in projects:
        critical += sum(
            1
            for issue in storage.get_project_issues(project.id)
            if issue.severity == Severity.CRITICAL and issue.status == IssueStatus.PENDING
        )
        applied += sum(
            1 for fix in storage.get_project_llm_fixes(project.id) if fix.status == FixStatus.APPLIED
        )

    avg_fix_rate = (
        round(sum(p.fix_percentage or 0 for p in projects) / len(projects)) if projects else 0
    )
    return DashboardStats(
        total_projects=len(projects),
        critical_issues=critical,
        fixes_applied=applied,
        avg_fix_rate=avg_fix_rate,
    )
