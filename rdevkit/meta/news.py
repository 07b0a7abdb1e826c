"""NEWS.md changelog handling."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..errors import ChangelogError
from ..models import ChangelogEntry
from ..writer import read_lines, write_lines


def ensure_changelog(path: Path) -> bool:
    """Create an empty changelog when missing; return True when one was created."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return True


def read_changelog(path: Path) -> List[str]:
    if not path.exists():
        return []
    try:
        return read_lines(path)
    except UnicodeDecodeError as exc:
        raise ChangelogError(f"{path.name} is not valid UTF-8: {exc}") from exc


def prepend_entry(
    path: Path,
    entry: ChangelogEntry,
    existing: Optional[Sequence[str]] = None,
) -> List[str]:
    """Insert ``entry`` above the existing changelog content and rewrite the file.

    ``existing`` lets callers pass lines they already read, so the file is
    validated before anything else in the project is modified.
    """
    if existing is None:
        existing = read_changelog(path)
    combined = [*entry.render(), *existing]
    write_lines(path, combined)
    return combined


def commit_message(fixtures: Iterable[str]) -> str:
    """Join fixtures into a one-line commit message without inline code markup."""
    return " + ".join(fixture.replace("`", "") for fixture in fixtures)


__all__ = ["commit_message", "ensure_changelog", "prepend_entry", "read_changelog"]
