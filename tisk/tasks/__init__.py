"""Task model and storage.

WHY: Groups the task dataclasses and the file-backed TaskList so the CLI
imports one package for everything task-related.

RULES:
- Storage is one JSON file per task inside the project's task directory
- The layout library never imports from here; display code bridges the two
"""

from tisk.tasks.models import Note, Status, Task
from tisk.tasks.store import StorageError, TaskList, order_tasks

__all__ = ["Note", "Status", "StorageError", "Task", "TaskList", "order_tasks"]
