"""Package structure and source code summary."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from ..config import RdevkitConfig, load_config
from ..logging import get_logger, notify
from ..models import SourceFileEntry
from ..writer import DASH_RULE, banner, split_lines, write_lines
from .tree import DirectoryTreeRenderer

_SOURCE_SUFFIXES = (".r",)

logger = get_logger("code")


def _no_files_notice(source_dirs: Sequence[str]) -> str:
    listed = " or ".join(f"{name.rstrip('/')}/" for name in source_dirs) or "source directories"
    return f"No .R files found in {listed}."


def _is_source_file(path: Path) -> bool:
    return path.is_file() and path.name.lower().endswith(_SOURCE_SUFFIXES)


def find_source_files(root: Path, source_dirs: Sequence[str]) -> List[Path]:
    """List R files directly inside each existing source directory.

    Directories are visited in the given order and files within each
    directory are sorted by name. Subdirectories are not descended into.
    """
    found: List[Path] = []
    for name in source_dirs:
        directory = root / name
        if not directory.is_dir():
            logger.debug("Skipping missing source directory %s", directory)
            continue
        files = sorted(
            (path for path in directory.iterdir() if _is_source_file(path)),
            key=lambda path: path.name,
        )
        found.extend(files)
    return found


def read_source_file(root: Path, path: Path) -> SourceFileEntry:
    """Read ``path`` for the summary, recording rather than raising open failures."""
    relative = path.relative_to(root).as_posix()
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s: %s", relative, exc)
        return SourceFileEntry(relative_path=relative, lines=[], error=str(exc))
    return SourceFileEntry(relative_path=relative, lines=split_lines(text))


def format_source_entry(entry: SourceFileEntry) -> List[str]:
    lines = ["", DASH_RULE, entry.relative_path, DASH_RULE]
    if entry.error is not None:
        lines.append(f"[unreadable: {entry.error}]")
    else:
        lines.extend(entry.lines)
    return lines


def build_package_summary(
    tree_lines: Iterable[str],
    entries: Sequence[SourceFileEntry],
    source_dirs: Sequence[str],
) -> List[str]:
    """Assemble the final summary lines from the tree and the collected sources."""
    output = [*banner("PROJECT STRUCTURE"), *tree_lines, "", ""]
    output.extend(banner("SOURCE CODE CONTENTS"))
    if not entries:
        output.append(_no_files_notice(source_dirs))
        return output
    for entry in entries:
        output.extend(format_source_entry(entry))
    return output


def summarise_package_code(
    package_path: str | Path,
    output_path: str | Path,
    *,
    config: RdevkitConfig | None = None,
    renderer: DirectoryTreeRenderer | None = None,
) -> Path:
    """Write the directory tree and R sources of a package into one text file."""
    root = Path(package_path).expanduser().resolve()
    if not root.exists():
        raise FileNotFoundError(f"Package path not found: {package_path}")
    if not root.is_dir():
        raise NotADirectoryError(f"Package path is not a directory: {package_path}")

    if config is None:
        config = load_config(root)
    renderer = renderer or DirectoryTreeRenderer.from_config(config.code.tree)
    source_dirs = config.code.source_dirs

    logger.info("Summarising package at %s", root)
    tree_lines = renderer.render(root)
    logger.debug("Tree rendering produced %d lines", len(tree_lines))

    files = find_source_files(root, source_dirs)
    logger.debug("Found %d source files", len(files))
    entries = [read_source_file(root, path) for path in files]

    output = Path(output_path).expanduser()
    write_lines(output, build_package_summary(tree_lines, entries, source_dirs))
    notify(logger, "success", "Successfully generated summary at: %s", output)
    return output


__all__ = [
    "build_package_summary",
    "find_source_files",
    "format_source_entry",
    "read_source_file",
    "summarise_package_code",
]
