"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Project: Tracked scan targets
- Issue: Vulnerability findings within a project
- FunctionBlock: Code blocks extracted from project files
- LlmFix: Suggested remediations for findings
- GitCommit: Commits recorded against a project
- Deployment: Deployments of a project to an environment
- HistoryEntry: Audit log of simulated actions
- User: Dashboard user accounts

All models inherit from the shared Base declarative class defined in data.db.
"""

from codecraft.data.db import Base
from codecraft.data.models.deployment import Deployment
from codecraft.data.models.function_block import FunctionBlock
from codecraft.data.models.git_commit import GitCommit
from codecraft.data.models.history import HistoryEntry
from codecraft.data.models.issue import Issue
from codecraft.data.models.llm_fix import LlmFix
from codecraft.data.models.project import Project
from codecraft.data.models.user import User

__all__ = [
    "Base",
    "Deployment",
    "FunctionBlock",
    "GitCommit",
    "HistoryEntry",
    "Issue",
    "LlmFix",
    "Project",
    "User",
]
