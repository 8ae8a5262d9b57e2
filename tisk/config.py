"""Configuration constants and .env loading for the task tracker.

WHY: A handful of values (project directory name, default priority, the
split threshold for wrapped table cells, log level) are worth overriding
per machine or per project without touching code. Keeping them in one
module makes them easy to find for humans and tests alike.

HOW: python-dotenv loads a .env file from the working directory on import.
Fixed names are module-level constants. Tunable settings are read by
load_*() functions when a command runs, so a typo in .env surfaces as a
ValueError the CLI reports instead of an import-time traceback.

RULES:
- Every setting has a default; a missing .env is never an error
- Integer settings and TISK_LOG_LEVEL raise ValueError naming the variable
  on bad input
- TISK_TABLE_WIDTH is optional; unset means "ask the terminal"
- Nothing outside this module reads TISK_* variables directly
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()


def load_int_setting(name: str, default: int | None) -> int | None:
    """Read an integer environment variable.

    RULES:
    - Unset or blank returns `default`
    - Non-integer or negative values raise ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}. Fix it in the environment or .env file.".format(
                name, raw
            )
        ) from None
    if value < 0:
        raise ValueError("{} must not be negative, got {}".format(name, value))
    return value


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

TISK_DIR_NAME = os.getenv("TISK_DIR_NAME", ".tisk")
"""Name of the directory that marks a project root and holds task files."""

CHECKOUT_FILE_NAME = ".checkout"
"""File inside the task directory holding the checked-out task ID."""

TASK_FILE_SUFFIX = ".json"

# ---------------------------------------------------------------------------
# Task defaults and display
# ---------------------------------------------------------------------------

MIN_TABLE_WIDTH = 40
"""Narrowest table the CLI will lay out, whatever the terminal reports."""


def load_default_priority() -> int:
    """Priority given to new tasks when `add` gets no -p (TISK_DEFAULT_PRIORITY)."""
    return load_int_setting("TISK_DEFAULT_PRIORITY", 1)


def load_split_limit() -> int:
    """Word length above which table cells may split a word (TISK_SPLIT_LIMIT)."""
    return load_int_setting("TISK_SPLIT_LIMIT", 7)


def load_table_width() -> int | None:
    """Fixed table width from TISK_TABLE_WIDTH, or None to ask the terminal."""
    return load_int_setting("TISK_TABLE_WIDTH", None)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_log_level() -> str:
    """Read TISK_LOG_LEVEL (default WARNING).

    RULES:
    - Case-insensitive; returned upper-cased
    - Anything outside LOG_LEVELS raises ValueError naming the variable
    """
    level = os.getenv("TISK_LOG_LEVEL", "").strip().upper() or "WARNING"
    if level not in LOG_LEVELS:
        raise ValueError(
            "TISK_LOG_LEVEL must be one of {}, got {!r}".format(", ".join(LOG_LEVELS), level)
        )
    return level
