"""Command-line interface for the tisk task tracker.

WHY: Users manage a project's tasks from the terminal: add, close, edit,
annotate and list them, from anywhere inside the project tree. The CLI
wires argument parsing, project discovery, task storage and table output
together behind one command.

HOW: Uses argparse with one subcommand per action. run() finds the
project's task directory, loads the TaskList and the checkout marker, then
dispatches to a handler. Each handler changes tasks in memory only and
returns a CommandResult whose effect says what must be persisted: nothing,
the task files, or the checkout marker.

RULES:
- `tisk init` is the only command that works outside a project
- No subcommand means `list` (open tasks)
- Only CommandEffect.WRITE writes task files; READ writes nothing
- User errors and bad TISK_* settings print "Error: <message>" to stderr
  and exit with status 1
- Listings go to stdout; log records go to stderr
- Python 3.9 compatible: no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from column_layout import ConfigError

from tisk import __version__, config
from tisk.display import format_notes, format_task_list, terminal_width
from tisk.tasks.store import StorageError, TaskList, order_tasks
from tisk.workspace import (
    InitResult,
    WorkspaceError,
    find_task_dir,
    initialize,
    read_checkout,
    write_checkin,
    write_checkout,
)

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A command could not be carried out as asked (bad ID, missing task)."""


class CommandEffect(Enum):
    """What running a command requires to be persisted afterwards.

    READ means the command only looked at the task list; nothing is
    written. WRITE means tasks changed and every task file is rewritten.
    CHECKOUT / CHECKIN update the checkout marker only.
    """

    READ = "read"
    WRITE = "write"
    CHECKOUT = "checkout"
    CHECKIN = "checkin"


@dataclass
class CommandResult:
    effect: CommandEffect
    task_id: Optional[int] = None


def _out(text: str) -> None:
    print(text, flush=True)


def _styled() -> bool:
    return sys.stdout.isatty()


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            "must be an integer greater than or equal to 0, got {!r}".format(value)
        ) from None
    if number < 0:
        raise argparse.ArgumentTypeError(
            "must be an integer greater than or equal to 0, got {}".format(number)
        )
    return number


def configure_logging(level: str) -> None:
    """Send log records to stderr in the project-wide format.

    Raises:
        ValueError: If `level` is not a logging level name.
    """
    logging.basicConfig(
        level=level.upper(),
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def handle_add(tasks: TaskList, args: argparse.Namespace) -> CommandResult:
    priority = args.priority if args.priority is not None else config.load_default_priority()
    task_id = tasks.add_task(args.name, priority)
    if args.note:
        tasks.get(task_id).add_note(args.note)
    logger.debug("Adding new task %d to task list", task_id)
    _out("Task {} was added".format(task_id))
    return CommandResult(CommandEffect.WRITE, task_id)


def handle_close(tasks: TaskList, args: argparse.Namespace) -> CommandResult:
    task = tasks.close_task(args.id)
    if task is None:
        raise CommandError("Could not find task with ID {}".format(args.id))
    if args.note:
        task.add_note(args.note)
    logger.debug("Closed task %d", task.id)
    _out("Task {} was closed".format(task.id))
    return CommandResult(CommandEffect.WRITE, task.id)


def handle_edit(tasks: TaskList, args: argparse.Namespace) -> CommandResult:
    if args.priority is None:
        return CommandResult(CommandEffect.READ, args.id)
    changed = tasks.set_priority(args.id, args.priority)
    if changed is None:
        raise CommandError("Could not find task with ID {}".format(args.id))
    old, task = changed
    _out("Task {} priority set from {} to {}".format(task.id, old, task.priority))
    return CommandResult(CommandEffect.WRITE, task.id)


def handle_note(
    tasks: TaskList,
    checked_out: Optional[int],
    args: argparse.Namespace,
) -> CommandResult:
    task_id = args.id if args.id is not None else checked_out
    if task_id is None:
        raise CommandError("Must have a task checked out or provide an id")

    task = tasks.get(task_id)
    if task is None:
        raise CommandError("Could not find task with ID {}".format(task_id))

    if args.list or args.note is None:
        sys.stdout.write(format_notes(task.notes, terminal_width(), styled=_styled()))
        return CommandResult(CommandEffect.READ, task_id)

    task.add_note(args.note)
    return CommandResult(CommandEffect.WRITE, task_id)


def handle_checkout(tasks: TaskList, args: argparse.Namespace) -> CommandResult:
    if tasks.get(args.id) is None:
        raise CommandError("Could not find task with ID {}".format(args.id))
    _out("Checkout task {}".format(args.id))
    return CommandResult(CommandEffect.CHECKOUT, args.id)


def handle_list(tasks: TaskList, args: argparse.Namespace) -> CommandResult:
    if getattr(args, "all", False):
        selected = tasks.get_all()
    elif getattr(args, "closed", False):
        selected = tasks.get_closed()
    else:
        selected = tasks.get_open()
    sys.stdout.write(format_task_list(order_tasks(selected), terminal_width(), styled=_styled()))
    return CommandResult(CommandEffect.READ)


def execute_command(
    tasks: TaskList,
    checked_out: Optional[int],
    args: argparse.Namespace,
) -> CommandResult:
    """Apply the parsed command to the in-memory task list."""
    command = args.command or "list"
    if command == "add":
        return handle_add(tasks, args)
    if command == "close":
        return handle_close(tasks, args)
    if command == "edit":
        return handle_edit(tasks, args)
    if command == "note":
        return handle_note(tasks, checked_out, args)
    if command == "checkout":
        return handle_checkout(tasks, args)
    if command == "checkin":
        return CommandResult(CommandEffect.CHECKIN)
    return handle_list(tasks, args)


def apply_effect(result: CommandResult, tasks: TaskList, task_dir: Path) -> None:
    """Persist whatever the command changed."""
    if result.effect is CommandEffect.WRITE:
        logger.debug("Writing tasks")
        tasks.write_all(task_dir)
    elif result.effect is CommandEffect.CHECKOUT:
        write_checkout(result.task_id, task_dir)
    elif result.effect is CommandEffect.CHECKIN:
        write_checkin(task_dir)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Subcommands: init, add, close, edit, note, checkout, checkin, list
    - IDs and priorities are non-negative integers
    - list flags --all / --closed / --open are mutually exclusive
    """
    parser = argparse.ArgumentParser(
        prog="tisk",
        description="Task management with scoping.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("init", help="Initialize a new tisk project based in this directory.")

    add = sub.add_parser("add", help="Add a new task to the project.")
    add.add_argument("name", help="Name of the task.")
    add.add_argument(
        "-p", "--priority",
        type=_non_negative_int,
        default=None,
        help="Sets the priority for this task (0+). Default: TISK_DEFAULT_PRIORITY, or 1.",
    )
    add.add_argument("-n", "--note", default=None, help="Adds a note to the newly created task.")

    close = sub.add_parser("close", help="Close a given task.")
    close.add_argument("id", type=_non_negative_int, help="ID of the task to close.")
    close.add_argument("-n", "--note", default=None, help="Adds a note to the closed task.")

    checkout = sub.add_parser(
        "checkout",
        help="Checkout a task. Task specific actions apply to it when no ID is given.",
    )
    checkout.add_argument("id", type=_non_negative_int, help="ID of the task to check out.")

    sub.add_parser("checkin", help="Release the currently checked out task.")

    edit = sub.add_parser("edit", help="Change properties for an existing task.")
    edit.add_argument("id", type=_non_negative_int, help="ID of the task to edit.")
    edit.add_argument(
        "-p", "--priority",
        type=_non_negative_int,
        default=None,
        help="Sets the priority for this task (0+).",
    )

    note = sub.add_parser(
        "note",
        help="Add a note to the checked out task, or to the task given with --id.",
    )
    note.add_argument("note", nargs="?", default=None, help="Text of the note.")
    note.add_argument(
        "--id",
        type=_non_negative_int,
        default=None,
        help="Task ID; overrides the checked out task.",
    )
    note.add_argument("-l", "--list", action="store_true", help="List the task's notes.")

    listing = sub.add_parser("list", help="List the tasks in this project.")
    which = listing.add_mutually_exclusive_group()
    which.add_argument("--all", action="store_true", help="Display all tasks, regardless of state.")
    which.add_argument("--closed", action="store_true", help="Display all closed tasks.")
    which.add_argument("--open", action="store_true", help="Display all open tasks (default).")

    return parser


def _run_init() -> int:
    result = initialize(Path.cwd(), config.TISK_DIR_NAME)
    if result is InitResult.INITIALIZED:
        _out("Initialized directory")
    else:
        _out("Already initialized")
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run one command and return the exit status.

    Args:
        argv: Command-line arguments; None means sys.argv[1:].
    """
    args = build_parser().parse_args(argv)

    try:
        configure_logging("DEBUG" if args.verbose else config.load_log_level())

        if args.command == "init":
            return _run_init()

        task_dir = find_task_dir(Path.cwd(), config.TISK_DIR_NAME)
        tasks = TaskList.read_tasks(task_dir)
        # checkin must still clear a marker that cannot be read
        checked_out = None if args.command == "checkin" else read_checkout(task_dir)

        result = execute_command(tasks, checked_out, args)
        apply_effect(result, tasks, task_dir)
    except (CommandError, WorkspaceError, StorageError, ConfigError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``tisk`` console script and ``python -m tisk``."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
