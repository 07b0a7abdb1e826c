"""Tests for rdevkit.db.table_format."""

from __future__ import annotations

from rdevkit.db.table_format import (
    EMPTY_ROWS_NOTICE,
    NO_COLUMNS_NOTICE,
    format_cell,
    render_rows,
)


def test_render_rows_right_aligns_columns() -> None:
    lines = render_rows(["name", "n"], [("a", 1), ("longer", 22)])

    assert lines == [
        "    name  n",
        "1      a  1",
        "2 longer 22",
    ]


def test_render_rows_widens_row_labels() -> None:
    rows = [(i,) for i in range(10)]

    lines = render_rows(["x"], rows)

    assert lines[0] == "   x"
    assert lines[1] == "1  0"
    assert lines[10] == "10 9"


def test_render_rows_without_rows() -> None:
    assert render_rows(["a", "b"], []) == ["a b", EMPTY_ROWS_NOTICE]


def test_render_rows_without_columns() -> None:
    assert render_rows([], []) == [NO_COLUMNS_NOTICE]


def test_format_cell_values() -> None:
    assert format_cell(None) == "NA"
    assert format_cell(True) == "TRUE"
    assert format_cell(b"\x00\x01") == "blob[2 B]"
    assert format_cell("two\nlines") == "two\\nlines"
    assert format_cell(1.5) == "1.5"


def test_render_rows_fits_ragged_rows_to_columns() -> None:
    lines = render_rows(["a", "b"], [(1, 2, 3), (4,)])

    assert lines == [
        "  a  b",
        "1 1  2",
        "2 4 NA",
    ]
