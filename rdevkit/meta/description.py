"""Reading and writing R package DESCRIPTION files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..errors import DescriptionError, MissingDescriptionError
from ..writer import split_lines, write_lines

_FIELD_RE = re.compile(r"^(?P<name>[^\s:#][^:]*):(?P<value>.*)$")


@dataclass
class _Field:
    name: str
    first_line: str
    continuation: List[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        parts = [self.first_line.strip(), *(line.strip() for line in self.continuation)]
        return "\n".join(part for part in parts if part)

    def lines(self) -> List[str]:
        return [f"{self.name}:{self.first_line}", *self.continuation]


class DescriptionFile:
    """DCF record for a package DESCRIPTION, preserving layout of untouched fields."""

    def __init__(self, fields: List[_Field] | None = None) -> None:
        self._fields: List[_Field] = list(fields or [])

    @classmethod
    def parse(cls, text: str) -> "DescriptionFile":
        fields: List[_Field] = []
        for number, raw in enumerate(split_lines(text), start=1):
            if not raw.strip():
                continue
            if raw[0] in " \t":
                if not fields:
                    raise DescriptionError(f"Continuation line before any field at line {number}")
                fields[-1].continuation.append(raw)
                continue
            match = _FIELD_RE.match(raw)
            if match is None:
                raise DescriptionError(f"Malformed DESCRIPTION line {number}: {raw!r}")
            fields.append(_Field(name=match.group("name").strip(), first_line=match.group("value")))
        return cls(fields)

    @classmethod
    def read(cls, path: Path) -> "DescriptionFile":
        if not path.is_file():
            raise MissingDescriptionError(
                "DESCRIPTION file does not exist, please create it first"
            )
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DescriptionError(f"{path.name} is not valid UTF-8: {exc}") from exc
        return cls.parse(text)

    def _find(self, name: str) -> Optional[_Field]:
        for item in self._fields:
            if item.name == name:
                return item
        return None

    def fields(self) -> List[str]:
        return [item.name for item in self._fields]

    def get(self, name: str) -> Optional[str]:
        item = self._find(name)
        return item.value if item is not None else None

    def set(self, name: str, value: str) -> None:
        """Replace a field's value, appending the field when it is new."""
        item = self._find(name)
        if item is None:
            self._fields.append(_Field(name=name, first_line=f" {value}"))
            return
        item.first_line = f" {value}"
        item.continuation = []

    @property
    def package(self) -> Optional[str]:
        return self.get("Package")

    @property
    def version(self) -> Optional[str]:
        return self.get("Version")

    @version.setter
    def version(self, value: str) -> None:
        self.set("Version", value)

    @property
    def date(self) -> Optional[str]:
        return self.get("Date")

    @date.setter
    def date(self, value: str) -> None:
        self.set("Date", value)

    def to_lines(self) -> List[str]:
        lines: List[str] = []
        for item in self._fields:
            lines.extend(item.lines())
        return lines

    def write(self, path: Path) -> Path:
        return write_lines(path, self.to_lines())


__all__ = ["DescriptionFile"]
