"""tisk: a file-per-task command-line task tracker.

WHY: Small projects want a task list that lives next to the code as plain
files under version control and reads well in a terminal.

HOW: Tasks are JSON files in a ``.tisk`` directory found by searching up
from the working directory. Listings are rendered as wrapped, aligned
tables by the column_layout library.

RULES:
- The project directory is the nearest ancestor holding ``.tisk``
- All table layout goes through column_layout; this package never pads
  or wraps text itself
"""

__version__ = "0.1.0"
