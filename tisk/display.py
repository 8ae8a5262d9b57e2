"""Task and note tables for the terminal.

WHY: Listing commands show tasks and notes as aligned tables sized to the
terminal. This module decides which columns exist and how wide the table
is, then hands the actual layout to column_layout.

HOW: terminal_width() picks the table width (config override, else the
terminal size). task_table() / note_table() configure the column layout
and format_task_list() / format_notes() render one row per item.

RULES:
- Task columns: ID(4) Date(10) Name(*) Pri(3) Nts(3)
- Note columns: ID(4) Note(*); note IDs are 1-based positions
- Width never drops below MIN_TABLE_WIDTH
- The header is underlined with an ANSI escape only when `styled` is true;
  the layout library itself never styles anything
- Functions return strings; printing is the CLI's job
"""

from __future__ import annotations

import shutil
from typing import Iterable, List

from column_layout import Table, TableRow

from tisk import config
from tisk.tasks.models import Note, Task

ID_WIDTH = 4
DATE_WIDTH = 10  # YYYY-mm-dd
PRIORITY_WIDTH = 3
NOTES_WIDTH = 3

_UNDERLINE = "\033[4m"
_RESET = "\033[0m"


def terminal_width() -> int:
    """Width to lay tables out in, from TISK_TABLE_WIDTH or the terminal."""
    width = config.load_table_width()
    if width is None:
        width = shutil.get_terminal_size().columns
    return max(width, config.MIN_TABLE_WIDTH)


def task_table(width: int) -> Table:
    return Table.configure(
        width,
        [
            ("ID", ID_WIDTH),
            ("Date", DATE_WIDTH),
            ("Name", None),
            ("Pri", PRIORITY_WIDTH),
            ("Nts", NOTES_WIDTH),
        ],
        split_limit=config.load_split_limit(),
    )


def note_table(width: int) -> Table:
    return Table.configure(
        width,
        [("ID", ID_WIDTH), ("Note", None)],
        split_limit=config.load_split_limit(),
    )


def _header(table: Table, styled: bool) -> str:
    header = table.render_header()
    if styled:
        return _UNDERLINE + header + _RESET
    return header


def format_task_list(tasks: Iterable[Task], width: int, styled: bool = False) -> str:
    """Render tasks, in the order given, as a table `width` characters wide."""
    table = task_table(width)
    out: List[str] = [_header(table, styled) + "\n"]
    for task in tasks:
        row = TableRow.of(
            task.id,
            task.created_at.strftime("%Y-%m-%d"),
            task.name,
            task.priority,
            len(task.notes),
        )
        out.append(table.render_row(row))
    return "".join(out)


def format_notes(notes: Iterable[Note], width: int, styled: bool = False) -> str:
    """Render a task's notes as a numbered table."""
    table = note_table(width)
    out: List[str] = [_header(table, styled) + "\n"]
    for index, note in enumerate(notes, 1):
        out.append(table.render_row(TableRow.of(index, note.note)))
    return "".join(out)
