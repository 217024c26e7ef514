from __future__ import annotations

import pytest

from codecraft.constants import Environment
from codecraft.models import InvalidActionError, RecordNotFoundError
from codecraft.services import actions
from codecraft.storage import Storage


def test_start_scan_updates_project_and_history(seeded_storage: Storage) -> None:
    options = actions.ScanOptions(scan_type="quick", language="go", git_password="secret")

    started = actions.start_scan(seeded_storage, 3, options)

    assert started.status == "SCANNING"
    assert 0 <= started.scan_id <= 999
    project = seeded_storage.get_project(3)
    assert project is not None
    assert project.status == "SCANNING"
    assert project.last_scan is not None
    (row,) = seeded_storage.get_project_history(3)
    assert row.action_data == {
        "scan_type": "quick",
        "selected_directories": None,
        "exclusions": None,
        "language": "go",
    }


def test_merge_fix_marks_applied(seeded_storage: Storage) -> None:
    merged = actions.merge_fix(seeded_storage, 1, 1)

    assert merged is not None
    assert merged.status == "APPLIED"
    assert seeded_storage.get_project_history(1)[0].action_type == "MERGE"


def test_deploy_project(seeded_storage: Storage) -> None:
    deployment = actions.deploy_project(seeded_storage, 2, Environment.PRODUCTION)

    assert deployment.environment == "PRODUCTION"
    assert deployment.status == "DEPLOYING"
    row = seeded_storage.get_project_history(2)[0]
    assert row.action_data == {"environment": "PRODUCTION", "deployment_id": deployment.id}


def test_get_fix_diff_errors(seeded_storage: Storage) -> None:
    with pytest.raises(InvalidActionError):
        actions.get_fix_diff(seeded_storage, 1, None)
    with pytest.raises(RecordNotFoundError):
        actions.get_fix_diff(seeded_storage, 2, 1)


def test_unknown_project_raises(seeded_storage: Storage) -> None:
    with pytest.raises(RecordNotFoundError) as excinfo:
        actions.request_auto_fix(seeded_storage, 9999)

    assert excinfo.value.kind == "Project"
    assert excinfo.value.record_id == 9999
    assert seeded_storage.get_all_history() == []
