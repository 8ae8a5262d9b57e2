"""Project discovery, initialization and the checkout marker.

WHY: A project is any directory holding a task directory (``.tisk`` by
default). Like git, the tool should work from any subdirectory of the
project, so it searches upward for that directory. The checkout marker
lets note-taking commands default to the task currently being worked on.

HOW: up_search() walks from a start directory through its ancestors and
returns the first matching child directory. initialize() creates the task
directory in place. The checkout marker is a tiny text file inside the
task directory holding one task ID.

RULES:
- Only directories match in up_search(); a file with the same name is ignored
- initialize() never touches an existing task directory
- Checkout marker: ".checkout" in the task dir, content is a decimal ID
- A missing marker means "nothing checked out"; removing a missing marker
  is not an error
- The marker is single-writer, last write wins, no locking
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from tisk.config import CHECKOUT_FILE_NAME, TISK_DIR_NAME

logger = logging.getLogger(__name__)


class WorkspaceError(RuntimeError):
    """The project directory or checkout marker is missing or unusable."""


class InitResult(Enum):
    INITIALIZED = "initialized"
    ALREADY_INITIALIZED = "already_initialized"


def up_search(start: str | Path, name: str) -> Path | None:
    """Find the nearest directory called `name` in start or its ancestors.

    Args:
        start: Directory to begin the search in.
        name: Name of the directory to look for.

    Returns:
        The resolved path of the matching directory, or None if no
        ancestor contains one.
    """
    origin = Path(start).resolve()
    for directory in [origin, *origin.parents]:
        candidate = directory / name
        if candidate.is_dir():
            logger.debug("Found %s in %s", name, directory)
            return candidate
    return None


def initialize(root: str | Path = ".", name: str = TISK_DIR_NAME) -> InitResult:
    """Create the task directory in `root` unless it already exists.

    Raises:
        WorkspaceError: If the directory cannot be created.
    """
    task_dir = Path(root) / name
    if task_dir.is_dir():
        return InitResult.ALREADY_INITIALIZED
    try:
        task_dir.mkdir()
    except OSError as e:
        raise WorkspaceError("Failed to initialize tisk project: {}".format(e)) from e
    logger.info("Initialized %s", task_dir)
    return InitResult.INITIALIZED


def find_task_dir(start: str | Path = ".", name: str = TISK_DIR_NAME) -> Path:
    """Return the task directory of the project containing `start`.

    Raises:
        WorkspaceError: If neither start nor any parent holds the directory.
    """
    path = up_search(start, name)
    if path is None:
        raise WorkspaceError(
            "Invalid tisk project, could not find {} dir in the current "
            "directory or any parent directory".format(name)
        )
    return path


def read_checkout(task_dir: str | Path) -> int | None:
    """Return the checked-out task ID, or None when nothing is checked out.

    Raises:
        WorkspaceError: If the marker exists but does not hold an integer.
    """
    path = Path(task_dir) / CHECKOUT_FILE_NAME
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise WorkspaceError("Failed to read checkout marker {}: {}".format(path, e)) from e
    try:
        return int(raw)
    except ValueError:
        raise WorkspaceError(
            "Checkout marker {} is corrupt: {!r} is not a task ID".format(path, raw)
        ) from None


def write_checkout(task_id: int, task_dir: str | Path) -> None:
    path = Path(task_dir) / CHECKOUT_FILE_NAME
    try:
        path.write_text(str(task_id), encoding="utf-8")
    except OSError as e:
        raise WorkspaceError("Failed to write checkout marker {}: {}".format(path, e)) from e
    logger.debug("Checked out task %d", task_id)


def write_checkin(task_dir: str | Path) -> None:
    """Remove the checkout marker; a missing marker is fine."""
    path = Path(task_dir) / CHECKOUT_FILE_NAME
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as e:
        raise WorkspaceError("Failed to remove checkout marker {}: {}".format(path, e)) from e
    logger.debug("Checked in")
