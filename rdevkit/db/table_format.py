"""Plain-text rendering of row previews."""

from __future__ import annotations

from typing import Any, List, Sequence

EMPTY_ROWS_NOTICE = "<0 rows> (or 0-length row.names)"
NO_COLUMNS_NOTICE = "data frame with 0 columns and 0 rows"


def format_cell(value: Any) -> str:
    if value is None:
        return "NA"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"blob[{len(value)} B]"
    return str(value).replace("\r", "\\r").replace("\n", "\\n")


def _fit_row(cells: List[str], width: int) -> List[str]:
    """Pad short rows with ``NA`` and drop cells beyond the last column."""
    return (cells + ["NA"] * width)[:width]


def render_rows(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[str]:
    """Render rows as a right-aligned grid numbered from 1, like a printed data frame."""
    if not columns:
        return [NO_COLUMNS_NOTICE]

    header = [str(name) for name in columns]
    if not rows:
        return [" ".join(header), EMPTY_ROWS_NOTICE]

    width = len(header)
    cells = [_fit_row([format_cell(value) for value in row], width) for row in rows]
    widths = [len(name) for name in header]
    for row in cells:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    label_width = len(str(len(cells)))
    lines = [" " * label_width + "".join(f" {name.rjust(widths[i])}" for i, name in enumerate(header))]
    for number, row in enumerate(cells, start=1):
        label = str(number).ljust(label_width)
        lines.append(label + "".join(f" {cell.rjust(widths[i])}" for i, cell in enumerate(row)))
    return lines


__all__ = ["EMPTY_ROWS_NOTICE", "NO_COLUMNS_NOTICE", "format_cell", "render_rows"]
