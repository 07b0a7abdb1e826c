"""Tabular data source adapters used by the database summary."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, List, Protocol, Sequence, Tuple

from ..errors import SourceUnavailableError
from ..logging import get_logger

logger = get_logger("db.source")

_POSTGRES_SCHEMES = ("postgresql://", "postgres://")

_INFORMATION_SCHEMA_TABLES = (
    "SELECT table_name FROM information_schema.tables "
    "WHERE table_type = 'BASE TABLE' "
    "AND table_schema NOT IN ('pg_catalog', 'information_schema')"
)
# Only schemas on the search path, so every listed name resolves unqualified.
_POSTGRES_TABLES = (
    "SELECT table_name FROM information_schema.tables "
    "WHERE table_type = 'BASE TABLE' "
    "AND table_schema = ANY(current_schemas(false))"
)
_SQLITE_TABLES = (
    "SELECT name FROM sqlite_master "
    "WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
)


class TabularSource(Protocol):
    """Capabilities the database summary needs from a data source."""

    def list_tables(self) -> List[str]: ...

    def quote_identifier(self, name: str) -> str: ...

    def send_query(self, sql: str) -> Any: ...

    def fetch(self, result: Any, n: int) -> Tuple[List[str], List[Tuple[Any, ...]]]: ...

    def clear(self, result: Any) -> None: ...


def quote_identifier(name: str) -> str:
    """Quote an SQL identifier using ANSI double quotes."""
    return '"' + name.replace('"', '""') + '"'


class DBAPISource:
    """Adapts a PEP 249 connection to the :class:`TabularSource` protocol."""

    def __init__(self, connection: Any) -> None:
        if connection is None or not callable(getattr(connection, "cursor", None)):
            raise SourceUnavailableError(
                "A DB-API connection with a cursor() method is required"
            )
        self.connection = connection

    @property
    def is_sqlite(self) -> bool:
        return isinstance(self.connection, sqlite3.Connection)

    @property
    def is_postgres(self) -> bool:
        module = type(self.connection).__module__ or ""
        return module.split(".")[0] in ("psycopg", "psycopg2")

    def list_tables(self) -> List[str]:
        if self.is_sqlite:
            sql = _SQLITE_TABLES
        elif self.is_postgres:
            sql = _POSTGRES_TABLES
        else:
            sql = _INFORMATION_SCHEMA_TABLES
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
            names = [str(row[0]) for row in cursor.fetchall()]
        except Exception as exc:
            raise SourceUnavailableError(f"Could not list tables: {exc}") from exc
        finally:
            cursor.close()
        return sorted(set(names))

    def quote_identifier(self, name: str) -> str:
        return quote_identifier(name)

    def send_query(self, sql: str) -> Any:
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
        except BaseException:
            cursor.close()
            self._rollback()
            raise
        return cursor

    def _rollback(self) -> None:
        # An aborted transaction rejects every later statement until rolled back.
        if getattr(self.connection, "autocommit", False):
            return
        rollback = getattr(self.connection, "rollback", None)
        if rollback is None:
            return
        try:
            rollback()
        except Exception:
            logger.warning("Rollback after a failed query also failed", exc_info=True)

    def fetch(self, result: Any, n: int) -> Tuple[List[str], List[Tuple[Any, ...]]]:
        description: Sequence[Sequence[Any]] = result.description or ()
        columns = [str(column[0]) for column in description]
        rows = [tuple(row) for row in result.fetchmany(n)] if n > 0 else []
        return columns, rows

    def clear(self, result: Any) -> None:
        result.close()

    def close(self) -> None:
        self.connection.close()


def open_source(target: str) -> DBAPISource:
    """Open a data source from a SQLite path or a PostgreSQL DSN."""
    if target.startswith(_POSTGRES_SCHEMES):
        import psycopg

        logger.debug("Connecting to PostgreSQL")
        try:
            connection = psycopg.connect(target, autocommit=True)
        except psycopg.Error as exc:
            raise SourceUnavailableError(f"Could not connect to database: {exc}") from exc
        return DBAPISource(connection)

    path = Path(target).expanduser()
    if not path.is_file():
        raise SourceUnavailableError(f"Database file not found: {target}")
    logger.debug("Opening SQLite database %s", path)
    try:
        connection = sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as exc:
        raise SourceUnavailableError(f"Could not open database {target}: {exc}") from exc
    return DBAPISource(connection)


__all__ = ["DBAPISource", "TabularSource", "open_source", "quote_identifier"]
