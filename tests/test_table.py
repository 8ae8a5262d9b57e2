"""Unit tests for Table and TableRow.

WHY: Table.configure() decides every column width the CLI prints with, and
render_row() has to keep wrapped cells aligned across several physical
lines. Both fail visibly (a ragged table) rather than loudly, so they need
exact-output tests.

HOW: configure() is tested for width resolution and each ConfigError case.
Rendering tests compare complete strings, padding included, so a missing
space or an extra trailing separator shows up as a diff.

RULES:
- Rendered rows end with "\\n"; the header does not.
- Columns are separated by exactly one space.
"""

import pytest

from column_layout import ColumnSpec, ConfigError, Table, TableRow


class TestConfigure:

    def test_shared_width_takes_remaining_space(self):
        table = Table.configure(20, [("ID", 4), ("Name", None)])
        assert table.widths == (4, 15)
        assert table.labels == ("ID", "Name")

    def test_shared_width_split_between_unsized_columns(self):
        table = Table.configure(30, [("ID", 4), ("A", None), ("B", None)])
        # 30 - (4 + 1) = 25, 25 // 2 = 12, remainder dropped
        assert table.widths == (4, 12, 12)

    def test_accepts_column_specs(self):
        table = Table.configure(20, [ColumnSpec("ID", 4), ColumnSpec("Name")])
        assert table.widths == (4, 15)

    def test_all_fixed_columns(self):
        table = Table.configure(20, [("ID", 4), ("Date", 10)])
        assert table.widths == (4, 10)

    def test_fixed_columns_overflow(self):
        with pytest.raises(ConfigError, match="greater than the width of the table"):
            Table.configure(5, [("ID", 10), ("Name", None)])

    def test_no_room_for_shared_column(self):
        with pytest.raises(ConfigError, match="unsized"):
            Table.configure(5, [("ID", 4), ("Name", None)])

    def test_zero_width_column_rejected(self):
        with pytest.raises(ConfigError, match="at least 1"):
            Table.configure(20, [("ID", 0), ("Name", None)])

    def test_no_columns_rejected(self):
        with pytest.raises(ConfigError):
            Table.configure(20, [])

    def test_split_limit_is_kept(self):
        table = Table.configure(20, [("Name", None)], split_limit=3)
        assert table.split_limit == 3


class TestRender:

    @pytest.fixture
    def table(self):
        return Table.configure(20, [("ID", 4), ("Name", None)], split_limit=5)

    def test_header(self, table):
        assert table.render_header() == "ID   Name           "

    def test_header_keeps_long_labels_whole(self):
        table = Table.configure(10, [("Priority", 3), ("Name", None)])
        assert table.render_header() == "Priority Name  "

    def test_single_line_row(self, table):
        assert table.render_row(TableRow.of(1, "do it")) == "1    do it          \n"

    def test_wrapped_cell_pads_other_columns(self):
        table = Table.configure(15, [("ID", 4), ("Name", None)], split_limit=5)
        rendered = table.render_row(TableRow.of(12, "the quick brown fox"))
        assert rendered == (
            "12   the quick \n"
            "     brown fox \n"
        )

    def test_hyphenated_cell_stays_inside_column(self):
        table = Table.configure(15, [("ID", 4), ("Name", None)], split_limit=5)
        rendered = table.render_row(TableRow.of(7, "argleybargley"))
        assert rendered == (
            "7    argleybar-\n"
            "     gley      \n"
        )
        for line in rendered.splitlines():
            assert len(line) == 15

    def test_tallest_cell_sets_height(self):
        table = Table.configure(12, [("A", 5), ("B", 5)], split_limit=5)
        rendered = table.render_row(["aa bb cc", "x"])
        # the space after "bb" wraps onto the second line
        assert rendered == (
            "aa bb x    \n"
            " cc        \n"
        )

    def test_missing_cells_render_blank(self, table):
        assert table.render_row(TableRow.of(3)) == "3" + " " * 19 + "\n"

    def test_empty_row_is_one_blank_line(self, table):
        assert table.render_row(TableRow()) == " " * 20 + "\n"

    def test_too_many_cells(self, table):
        with pytest.raises(ConfigError, match="3 cells"):
            table.render_row(TableRow.of(1, "a", "b"))

    def test_accepts_plain_sequence(self, table):
        assert table.render_row((1, "do it")) == table.render_row(TableRow.of(1, "do it"))

    def test_render_joins_header_and_rows(self, table):
        rendered = table.render([TableRow.of(1, "a"), TableRow.of(2, "b")])
        assert rendered.splitlines() == [
            "ID   Name           ",
            "1    a              ",
            "2    b              ",
        ]

    def test_render_with_no_rows(self, table):
        assert table.render([]) == table.render_header() + "\n"

    def test_table_is_reusable(self, table):
        row = TableRow.of(1, "the quick brown fox jumped")
        assert table.render_row(row) == table.render_row(row)


class TestTableRow:

    def test_push_converts_to_text(self):
        row = TableRow().push(1).push("name").push(2.5)
        assert row.cells() == ["1", "name", "2.5"]

    def test_push_returns_row_for_chaining(self):
        row = TableRow()
        assert row.push("a") is row

    def test_len_and_iter(self):
        row = TableRow.of("a", "b")
        assert len(row) == 2
        assert list(row) == ["a", "b"]

    def test_cells_is_a_copy(self):
        row = TableRow.of("a")
        row.cells().append("b")
        assert len(row) == 1
