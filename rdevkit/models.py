"""Core data models shared across rdevkit routines."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class TableDescriptor:
    """A table enumerated from a data source."""

    name: str


@dataclass
class RowPreview:
    """Bounded sample of a table's rows, or the error raised while reading it."""

    table_name: str
    columns: List[str] = field(default_factory=list)
    rows: List[Tuple[Any, ...]] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SourceFileEntry:
    """Contents of one source file collected for the package summary."""

    relative_path: str
    lines: List[str]
    error: Optional[str] = None


@dataclass
class ChangelogEntry:
    """A release entry destined for the top of NEWS.md."""

    package_name: str
    version: str
    date: str
    fixtures: List[str] = field(default_factory=list)

    def render(self) -> List[str]:
        """Return the entry as changelog lines, ending with a blank line."""
        heading = f"# {self.package_name} {self.version} -- {self.date}"
        return [heading, *(f"* {fixture}" for fixture in self.fixtures), ""]
