"""Database structure and content summary."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..config import DEFAULT_PREVIEW_ROWS
from ..errors import SourceUnavailableError
from ..logging import get_logger, notify
from ..models import RowPreview, TableDescriptor
from ..writer import DASH_RULE, banner, write_lines
from .source import TabularSource
from .table_format import render_rows

logger = get_logger("db")

_REQUIRED_CAPABILITIES = ("list_tables", "quote_identifier", "send_query", "fetch", "clear")


def _check_source(source: object) -> None:
    missing = [name for name in _REQUIRED_CAPABILITIES if not callable(getattr(source, name, None))]
    if missing:
        raise SourceUnavailableError(
            f"Data source does not support: {', '.join(missing)}"
        )


def list_tables(source: TabularSource) -> List[TableDescriptor]:
    return [TableDescriptor(name=name) for name in source.list_tables()]


def preview_table(source: TabularSource, table: TableDescriptor, n: int = DEFAULT_PREVIEW_ROWS) -> RowPreview:
    """Fetch at most ``n`` rows of ``table``, capturing any failure in the preview.

    The row bound is applied when fetching rather than with ``LIMIT`` since
    limit syntax differs between SQL dialects.
    """
    query = f"SELECT * FROM {source.quote_identifier(table.name)}"
    try:
        result = source.send_query(query)
        try:
            columns, rows = source.fetch(result, n)
        finally:
            source.clear(result)
    except Exception as exc:
        logger.warning("Failed to preview table %s: %s", table.name, exc)
        return RowPreview(table_name=table.name, error=f"Error reading table: {exc}")
    return RowPreview(table_name=table.name, columns=list(columns), rows=list(rows))


def build_header(tables: Sequence[TableDescriptor], n: int = DEFAULT_PREVIEW_ROWS) -> List[str]:
    lines = banner("DATABASE SUMMARY")
    lines.append(f"Total Tables: {len(tables)}")
    lines.extend(["", "Table List:"])
    lines.extend(f" - {table.name}" for table in tables)
    lines.extend(["", ""])
    lines.extend(banner(f"TABLE DATA PREVIEWS (First {n} Rows)"))
    return lines


def format_preview(preview: RowPreview) -> List[str]:
    lines = ["", DASH_RULE, f"Table: {preview.table_name}", DASH_RULE]
    if preview.error is not None:
        lines.append(preview.error)
    else:
        lines.extend(render_rows(preview.columns, preview.rows))
    return lines


def summarise_db_content(
    source: TabularSource,
    output_path: str | Path,
    *,
    preview_rows: int = DEFAULT_PREVIEW_ROWS,
) -> Path:
    """Write the table list and a preview of every table to ``output_path``."""
    _check_source(source)

    tables = list_tables(source)
    logger.info("Summarising %d tables", len(tables))

    output_lines = build_header(tables, preview_rows)
    for table in tables:
        logger.debug("Previewing table %s", table.name)
        output_lines.extend(format_preview(preview_table(source, table, preview_rows)))

    output = Path(output_path).expanduser()
    write_lines(output, output_lines)
    notify(logger, "success", "Successfully generated database summary at: %s", output)
    return output


__all__ = [
    "build_header",
    "format_preview",
    "list_tables",
    "preview_table",
    "summarise_db_content",
]
