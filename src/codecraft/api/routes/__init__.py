"""Route handlers for the API."""

from codecraft.api.routes import (
    actions,
    deployments,
    function_blocks,
    git_commits,
    health,
    history,
    issues,
    llm_fixes,
    projects,
    stats,
    users,
)

__all__ = [
    "actions",
    "deployments",
    "function_blocks",
    "git_commits",
    "health",
    "history",
    "issues",
    "llm_fixes",
    "projects",
    "stats",
    "users",
]
