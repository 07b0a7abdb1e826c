"""Utilities for R package development: database, source and release summaries."""

from .code import summarise_package_code
from .db import summarise_db_content
from .meta import update_package_meta

__version__ = "0.1.0"

__all__ = ["summarise_db_content", "summarise_package_code", "update_package_meta"]
