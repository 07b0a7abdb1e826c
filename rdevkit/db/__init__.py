"""Database table listing and row previews."""

from .source import DBAPISource, TabularSource, open_source
from .summary import summarise_db_content

__all__ = ["DBAPISource", "TabularSource", "open_source", "summarise_db_content"]
