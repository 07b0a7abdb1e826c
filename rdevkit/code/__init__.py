"""Package structure and source aggregation."""

from .summary import summarise_package_code
from .tree import DirectoryTreeRenderer

__all__ = ["DirectoryTreeRenderer", "summarise_package_code"]
