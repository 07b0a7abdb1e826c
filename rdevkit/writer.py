"""Text file helpers shared by the summary and changelog writers."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List

RULE_WIDTH = 50
DASH_RULE = "-" * RULE_WIDTH
EQUALS_RULE = "=" * RULE_WIDTH

_NEW_FILE_MODE = 0o644


def banner(title: str) -> List[str]:
    """Return a section banner framed by `=` rules."""
    return [EQUALS_RULE, title, EQUALS_RULE]


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing newline and any ``\\r`` before it.

    Form feeds and Unicode line separators stay inside their line.
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def read_lines(path: Path, *, errors: str = "strict") -> List[str]:
    """Read a UTF-8 text file into a list of lines without terminators."""
    return split_lines(path.read_text(encoding="utf-8", errors=errors))


def write_lines(path: Path, lines: Iterable[str]) -> Path:
    """Overwrite ``path`` with newline-terminated lines.

    Parent directories are created as needed. Content is written to a
    temporary sibling and moved into place, so an interrupted run never
    leaves a truncated file behind.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = "".join(f"{line}\n" for line in lines)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, _NEW_FILE_MODE)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return path


__all__ = ["DASH_RULE", "EQUALS_RULE", "RULE_WIDTH", "banner", "read_lines", "split_lines", "write_lines"]
