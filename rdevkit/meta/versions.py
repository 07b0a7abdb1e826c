"""Version bumping and interactive version choice."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..errors import VersionError

BUMP_KINDS = ("major", "minor", "patch", "dev")
DEV_START = 9000

_VERSION_RE = re.compile(r"^\d+(?:[.-]\d+)+$")


@dataclass(frozen=True)
class VersionOption:
    """One entry of the version menu."""

    kind: str
    version: str


def parse_version(version: str) -> Tuple[int, ...]:
    """Split an R package version such as ``1.2-3`` or ``0.1.0.9000`` into integers."""
    text = version.strip()
    if not _VERSION_RE.match(text):
        raise VersionError(f"Invalid package version: {version!r}")
    return tuple(int(part) for part in re.split(r"[.-]", text))


def bump_version(current: str, kind: str) -> str:
    parts = list(parse_version(current))
    while len(parts) < 3:
        parts.append(0)
    major, minor, patch = parts[:3]

    if kind == "major":
        bumped = [major + 1, 0, 0]
    elif kind == "minor":
        bumped = [major, minor + 1, 0]
    elif kind == "patch":
        bumped = [major, minor, patch + 1]
    elif kind == "dev":
        dev = parts[3] + 1 if len(parts) > 3 else DEV_START
        bumped = [major, minor, patch, dev]
    else:
        raise VersionError(f"Unknown version bump {kind!r}; expected one of {', '.join(BUMP_KINDS)}")
    return ".".join(str(part) for part in bumped)


def bump_options(current: str) -> List[VersionOption]:
    return [VersionOption(kind=kind, version=bump_version(current, kind)) for kind in BUMP_KINDS]


class VersionChooser(Protocol):
    """Returns the new version, or ``None`` when no choice was made."""

    def choose(self, current: str) -> Optional[str]: ...


class FixedVersionChooser:
    """Non-interactive chooser for a pre-selected version or bump keyword."""

    def __init__(self, version: str) -> None:
        self.version = version.strip()

    def choose(self, current: str) -> Optional[str]:
        if self.version in BUMP_KINDS:
            return bump_version(current, self.version)
        parse_version(self.version)
        return self.version


class PromptVersionChooser:
    """Presents the bump menu on the terminal and reads the operator's pick."""

    def __init__(
        self,
        *,
        message: str = "Choose the appropriate version number",
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.message = message
        self._input = input_func or input
        self._output = output_func or print

    def choose(self, current: str) -> Optional[str]:
        options = bump_options(current)
        self._output(f"Current version is {current}.")
        self._output(f"{self.message}:")
        for index, option in enumerate(options, start=1):
            self._output(f"{index}: {option.kind:<6} --> {option.version}")
        try:
            answer = self._input("Selection (0 to cancel): ")
        except (EOFError, KeyboardInterrupt):
            return None
        return _select(options, answer)


def _select(options: Sequence[VersionOption], answer: str) -> Optional[str]:
    answer = answer.strip()
    if not answer.isdigit():
        return None
    index = int(answer)
    if index < 1 or index > len(options):
        return None
    return options[index - 1].version


__all__ = [
    "BUMP_KINDS",
    "FixedVersionChooser",
    "PromptVersionChooser",
    "VersionChooser",
    "VersionOption",
    "bump_options",
    "bump_version",
    "parse_version",
]
