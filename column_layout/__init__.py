"""Column layout library: wrap text into fixed-width terminal columns.

WHY: The task tracker prints tasks and notes as aligned tables whose cells
can hold text of any length. Wrapping that text so it never spills out of
its column, while still breaking on spaces and hyphenating long words, is
the one part of the tool with real algorithmic depth. It lives here as a
small library with no I/O so it can be tested on its own.

HOW: Three layers, leaves first:
  1. tokenize(): groups characters into whitespace and word runs.
  2. format_to_column(): greedy line breaker over those runs, producing
     Line(text, hyphenated) values no wider than the column.
  3. Table: resolves column widths and renders header and rows, wrapping
     every cell with format_to_column().

RULES:
- Everything here is pure and synchronous; nothing prints or logs.
- ConfigError is the only exception raised.
- Each character counts as one column (no wide-character or ANSI handling).
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

from .core import DEFAULT_SPLIT_LIMIT, fit_to_column, format_to_column, is_splittable
from .models import Category, ColumnSpec, ConfigError, Line, Token
from .table import Table, TableRow
from .tokenizer import punctuation_category, tokenize, whitespace_category

__all__ = [
    "Category",
    "ColumnSpec",
    "ConfigError",
    "DEFAULT_SPLIT_LIMIT",
    "Line",
    "Table",
    "TableRow",
    "Token",
    "fit_to_column",
    "format_to_column",
    "is_splittable",
    "punctuation_category",
    "tokenize",
    "whitespace_category",
]
