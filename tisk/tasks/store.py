"""In-memory task list backed by one JSON file per task.

WHY: Commands operate on the whole set of tasks in a project (find the
next ID, filter open tasks, sort a listing) but the project directory
stores each task as its own file so edits stay small and merge-friendly.
TaskList is the bridge between the two.

HOW: read_tasks() loads every *.json file in the task directory into Task
objects. Mutating methods change tasks in memory only; write_all() puts
every task back as <id>.json. The CLI decides whether a command needs
write_all() at all.

RULES:
- One task per file, named <id>.json, inside the task directory
- Files that are not valid task documents raise StorageError naming the file
- next_id() is 1 for an empty list, else the largest ID + 1
- Lookups by unknown ID return None; the caller reports the error
- order_tasks(): highest priority first, oldest first within a priority
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

import jsonschema

from tisk.config import TASK_FILE_SUFFIX
from tisk.tasks.models import Status, Task

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """A task file could not be read or written."""


class TaskList:
    """All tasks of one project, held in memory."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    @classmethod
    def read_tasks(cls, task_dir: str | Path) -> TaskList:
        """Load every task file from a project's task directory.

        Args:
            task_dir: The project's task directory (e.g. ``.tisk``).

        Returns:
            A TaskList holding one Task per file, ordered by file name.

        Raises:
            StorageError: If the directory cannot be listed or a file is
                not a valid task document.
        """
        directory = Path(task_dir)
        try:
            paths = sorted(p for p in directory.iterdir() if p.suffix == TASK_FILE_SUFFIX)
        except OSError as e:
            raise StorageError("Failed to read tasks from {}: {}".format(directory, e)) from e

        tasks = [_read_task(p) for p in paths if p.is_file()]
        logger.debug("Read %d task(s) from %s", len(tasks), directory)
        return cls(tasks)

    def write_all(self, task_dir: str | Path) -> int:
        """Write every task to <id>.json in task_dir and return the count."""
        directory = Path(task_dir)
        count = 0
        for task in self._tasks:
            _write_task(task, directory)
            count += 1
        logger.debug("Wrote %d task(s) to %s", count, directory)
        return count

    def next_id(self) -> int:
        if not self._tasks:
            return 1
        return max(t.id for t in self._tasks) + 1

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add_task(self, name: str, priority: int) -> int:
        """Create an open task and return its new ID."""
        task_id = self.next_id()
        self._tasks.append(Task(id=task_id, name=name, status=Status.OPEN, priority=priority))
        logger.debug("Added task %d", task_id)
        return task_id

    def close_task(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        if task is not None:
            task.status = Status.CLOSED
        return task

    def set_priority(self, task_id: int, priority: int) -> tuple[int, Task] | None:
        """Change a task's priority.

        Returns:
            ``(old_priority, task)`` or None if no task has that ID.
        """
        task = self.get(task_id)
        if task is None:
            return None
        old = task.priority
        task.priority = priority
        return old, task

    def get_all(self) -> list[Task]:
        return list(self._tasks)

    def get_open(self) -> list[Task]:
        return self.filter(Status.OPEN)

    def get_closed(self) -> list[Task]:
        return self.filter(Status.CLOSED)

    def filter(self, status: Status) -> list[Task]:
        return [t for t in self._tasks if t.status is status]


def order_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Sort tasks for display: priority descending, then oldest first."""
    return sorted(tasks, key=lambda t: (-t.priority, t.created_at))


def _read_task(path: Path) -> Task:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Task.from_dict(data)
    except OSError as e:
        raise StorageError("Failed to read task file {}: {}".format(path, e)) from e
    except json.JSONDecodeError as e:
        raise StorageError("Task file {} is not valid JSON: {}".format(path, e)) from e
    except jsonschema.ValidationError as e:
        raise StorageError("Task file {} is invalid: {}".format(path, e.message)) from e
    except ValueError as e:
        raise StorageError("Task file {} has a bad value: {}".format(path, e)) from e


def _write_task(task: Task, directory: Path) -> Path:
    path = directory / "{}{}".format(task.id, TASK_FILE_SUFFIX)
    try:
        content = json.dumps(task.to_dict(), indent=2, ensure_ascii=False)
    except jsonschema.ValidationError as e:
        raise StorageError("Task {} is invalid: {}".format(task.id, e.message)) from e
    try:
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        raise StorageError("Failed to write task file {}: {}".format(path, e)) from e
    return path
