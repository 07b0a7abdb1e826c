"""Text rendering of a directory subtree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import List, Sequence

from ..config import TreeConfig

_UNICODE_GLYPHS = ("├── ", "└── ", "│   ", "    ")
_ASCII_GLYPHS = ("|-- ", "`-- ", "|   ", "    ")


@dataclass
class ExcludeRule:
    """A gitignore-style pattern that prunes entries from the tree."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return ExcludeRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


class DirectoryTreeRenderer:
    """Renders every file and directory below a root, in the style of ``fs::dir_tree``.

    The default glyphs are the box-drawing characters ``fs::dir_tree`` prints on
    a UTF-8 console. Pass ``ascii=True`` (or set ``tree.ascii`` in the config)
    for a pure ASCII tree using ``|--`` and ``` `-- ``` connectors.
    """

    def __init__(
        self,
        *,
        ascii: bool = False,
        include_hidden: bool = False,
        exclude: Sequence[str] = (),
    ) -> None:
        self._glyphs = _ASCII_GLYPHS if ascii else _UNICODE_GLYPHS
        self._include_hidden = include_hidden
        self._rules = [rule for rule in map(build_exclude_rule, exclude) if rule is not None]

    @classmethod
    def from_config(cls, config: TreeConfig) -> "DirectoryTreeRenderer":
        return cls(
            ascii=config.ascii,
            include_hidden=config.include_hidden,
            exclude=config.exclude,
        )

    def render(self, root: Path) -> List[str]:
        """Return the tree as lines, headed by the root path itself."""
        root_path = Path(root)
        if not root_path.is_dir():
            raise NotADirectoryError(f"Cannot render tree, not a directory: {root}")
        lines = [str(root_path)]
        self._render_children(root_path, "", "", lines)
        return lines

    def _render_children(self, directory: Path, rel_dir: str, prefix: str, lines: List[str]) -> None:
        tee, elbow, pipe, blank = self._glyphs
        entries = self._list_entries(directory, rel_dir)
        for index, (name, is_dir) in enumerate(entries):
            last = index == len(entries) - 1
            lines.append(f"{prefix}{elbow if last else tee}{name}")
            if is_dir:
                child = directory / name
                # Symlinked directories are shown but never followed.
                if child.is_symlink():
                    continue
                child_rel = f"{rel_dir}/{name}" if rel_dir else name
                self._render_children(child, child_rel, prefix + (blank if last else pipe), lines)

    def _list_entries(self, directory: Path, rel_dir: str) -> List[tuple[str, bool]]:
        entries: List[tuple[str, bool]] = []
        with os.scandir(directory) as iterator:
            for entry in iterator:
                if not self._include_hidden and entry.name.startswith("."):
                    continue
                is_dir = entry.is_dir()
                rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
                if any(rule.matches(rel_path, is_dir) for rule in self._rules):
                    continue
                entries.append((entry.name, is_dir))
        entries.sort(key=lambda item: item[0])
        return entries


__all__ = ["DirectoryTreeRenderer", "ExcludeRule", "build_exclude_rule"]
