"""Shared test fixtures for the tisk test suite.

WHY: Storage, workspace and CLI tests all need a throwaway project
directory and a few tasks with known timestamps. Centralizing them keeps
every module working from the same data.

HOW: Pytest fixtures build a project under tmp_path (optionally making it
the working directory) and a TaskList with deterministic creation times.

RULES:
- All file I/O goes through tmp_path; nothing touches the real CWD
- Timestamps are fixed UTC datetimes so sort order is reproducible
- Environment overrides use monkeypatch and are undone per test
"""

from datetime import datetime, timezone

import pytest

from tisk import config
from tisk.tasks.models import Note, Status, Task
from tisk.tasks.store import TaskList

T0 = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
T1 = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 3, 10, 18, 45, tzinfo=timezone.utc)


@pytest.fixture
def sample_tasks():
    """Three tasks: two open (different priorities), one closed with a note."""
    return [
        Task(id=1, name="write the parser", status=Status.OPEN, priority=1, created_at=T0),
        Task(id=2, name="fix the build", status=Status.OPEN, priority=3, created_at=T1),
        Task(
            id=3,
            name="ship it",
            status=Status.CLOSED,
            priority=1,
            created_at=T2,
            notes=[Note(note="released", created_at=T2)],
        ),
    ]


@pytest.fixture
def task_list(sample_tasks):
    return TaskList(sample_tasks)


@pytest.fixture
def task_dir(tmp_path):
    """An initialized, empty task directory."""
    path = tmp_path / config.TISK_DIR_NAME
    path.mkdir()
    return path


@pytest.fixture
def project(tmp_path, task_dir, monkeypatch):
    """An initialized project that is also the working directory.

    Tables are pinned to 60 columns so CLI output does not depend on the
    terminal running the tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TISK_TABLE_WIDTH", "60")
    return tmp_path
