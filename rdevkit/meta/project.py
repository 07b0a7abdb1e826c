"""Detection of R project roots."""

from __future__ import annotations

from pathlib import Path

from ..errors import NotAProjectError

_ROOT_MARKERS = ("DESCRIPTION", ".here")


def is_project_root(path: Path) -> bool:
    if not path.is_dir():
        return False
    if any((path / marker).exists() for marker in _ROOT_MARKERS):
        return True
    if (path / ".git").is_dir():
        return True
    return any(path.glob("*.Rproj"))


def check_is_project(path: str | Path) -> Path:
    """Return the resolved project root, or raise when ``path`` is not one."""
    root = Path(path).expanduser().resolve()
    if not is_project_root(root):
        raise NotAProjectError(
            f"{root} does not appear to be inside a project or package "
            "(expected DESCRIPTION, an .Rproj file, .here or a .git directory)"
        )
    return root


__all__ = ["check_is_project", "is_project_root"]
