"""Fixed-width table layout built on the line breaker.

WHY: Task lists are shown as aligned columns in a terminal. Some columns
have a natural fixed width (IDs, dates), others (names, notes) should take
whatever space is left. Long cell text must wrap inside its own column
without disturbing the alignment of its neighbours.

HOW: Table.configure() resolves every column to a concrete width, failing
early with ConfigError if the fixed widths cannot fit. render_row() passes
each cell through format_to_column(), then emits as many physical lines as
the tallest cell needs, padding shorter cells with blanks.

RULES:
- Shared width = (total_width - sum(fixed_width + 1)) // unsized_columns.
  The remainder of the division is dropped, not distributed.
- Exactly one space between adjacent columns, never a trailing separator.
- Every physical row line ends with "\\n"; the header has no newline.
- Headers are plain text. Styling (underline, colour) belongs to the caller.
- Configuration errors surface at configure() time, never mid-render.
- A Table is immutable after configure() and safe to share between threads.
"""

from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .core import DEFAULT_SPLIT_LIMIT, format_to_column
from .models import ColumnSpec, ConfigError, Line

ColumnArg = Union[ColumnSpec, Tuple[str, Optional[int]]]

SEPARATOR = " "


class TableRow:
    """An ordered set of cell values making up one logical table row.

    Any value with a ``str()`` conversion can be a cell: ints, dates,
    strings. The conversion happens on push so the row only holds text.
    """

    def __init__(self) -> None:
        self._cells = []  # type: List[str]

    @classmethod
    def of(cls, *values: Any) -> "TableRow":
        row = cls()
        for value in values:
            row.push(value)
        return row

    def push(self, value: Any) -> "TableRow":
        self._cells.append(str(value))
        return self

    def cells(self) -> List[str]:
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)


def _as_spec(column: ColumnArg) -> ColumnSpec:
    if isinstance(column, ColumnSpec):
        return column
    label, width = column
    return ColumnSpec(label=label, width=width)


class Table:
    """A configured set of labelled, fixed-width columns.

    Build one with Table.configure(); the constructor expects widths that
    have already been resolved.
    """

    def __init__(
        self,
        total_width: int,
        labels: Sequence[str],
        widths: Sequence[int],
        split_limit: int = DEFAULT_SPLIT_LIMIT,
    ) -> None:
        self.total_width = total_width
        self.split_limit = split_limit
        self._labels = tuple(labels)
        self._widths = tuple(widths)

    @classmethod
    def configure(
        cls,
        total_width: int,
        columns: Iterable[ColumnArg],
        split_limit: int = DEFAULT_SPLIT_LIMIT,
    ) -> "Table":
        """Resolve column widths for a table `total_width` characters wide.

        Args:
            total_width: Width of the whole table in characters.
            columns: Ordered (label, width) pairs or ColumnSpec objects.
                A width of None means "share the remaining space".
            split_limit: Split threshold handed to the line breaker.

        Returns:
            A Table ready to render.

        Raises:
            ConfigError: If there are no columns, a fixed width is below 1,
                the fixed widths plus their separators exceed total_width,
                or the shared width would come out below 1.
        """
        specs = [_as_spec(c) for c in columns]
        if not specs:
            raise ConfigError("A table needs at least one column")

        allocated = 0
        unsized = 0
        for spec in specs:
            if spec.width is None:
                unsized += 1
                continue
            if spec.width < 1:
                raise ConfigError(
                    "Column '{}' has width {}; widths must be at least 1".format(
                        spec.label, spec.width
                    )
                )
            allocated += spec.width + 1

        if allocated > total_width:
            raise ConfigError(
                "Total width of columns ({}) is greater than the width of the table ({})".format(
                    allocated, total_width
                )
            )

        shared = 0
        if unsized:
            shared = (total_width - allocated) // unsized
            if shared < 1:
                raise ConfigError(
                    "No space left for {} unsized column(s) in a table {} wide".format(
                        unsized, total_width
                    )
                )

        widths = [shared if spec.width is None else spec.width for spec in specs]
        return cls(total_width, [spec.label for spec in specs], widths, split_limit)

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    @property
    def widths(self) -> Tuple[int, ...]:
        return self._widths

    def render_header(self) -> str:
        """Return the column labels padded to their columns, on one line.

        A label longer than its column is kept whole and pushes the labels
        after it to the right.
        """
        cells = [
            label.ljust(width)
            for label, width in zip(self._labels, self._widths)
        ]
        return SEPARATOR.join(cells)

    def render_row(self, row: Union[TableRow, Sequence[Any]]) -> str:
        """Lay out one row, wrapping each cell inside its column.

        Args:
            row: A TableRow, or any sequence of values convertible to str.
                Missing trailing cells render blank.

        Returns:
            One or more newline-terminated physical lines.

        Raises:
            ConfigError: If the row has more cells than the table has columns.
        """
        cells = row.cells() if isinstance(row, TableRow) else [str(v) for v in row]
        if len(cells) > len(self._widths):
            raise ConfigError(
                "Row has {} cells but the table has {} columns".format(
                    len(cells), len(self._widths)
                )
            )

        fitted = []  # type: List[List[Line]]
        for text, width in zip(cells, self._widths):
            fitted.append(list(format_to_column(text, width, self.split_limit)))

        height = max([1] + [len(lines) for lines in fitted])

        out = []  # type: List[str]
        for index in range(height):
            parts = []
            for col, width in enumerate(self._widths):
                lines = fitted[col] if col < len(fitted) else []
                text = lines[index].render() if index < len(lines) else ""
                parts.append(text.ljust(width))
            out.append(SEPARATOR.join(parts) + "\n")
        return "".join(out)

    def render(self, rows: Iterable[Union[TableRow, Sequence[Any]]]) -> str:
        """Render the header followed by every row."""
        body = "".join(self.render_row(row) for row in rows)
        return self.render_header() + "\n" + body
