"""Tests for rdevkit.meta.description."""

from __future__ import annotations

from pathlib import Path

import pytest

from rdevkit.errors import DescriptionError, MissingDescriptionError
from rdevkit.meta.description import DescriptionFile
from tests._fixtures.project_builder import DEFAULT_DESCRIPTION


def test_parse_reads_fields_and_continuations() -> None:
    desc = DescriptionFile.parse(DEFAULT_DESCRIPTION)

    assert desc.fields() == ["Package", "Title", "Version", "Date", "Authors@R", "License"]
    assert desc.package == "demo"
    assert desc.version == "1.0.0"
    assert desc.date == "2024-01-01"
    assert desc.get("Authors@R") == 'person("Ada", "Lovelace", role = c("aut", "cre"))'
    assert desc.get("Missing") is None


def test_write_preserves_untouched_fields(tmp_path: Path) -> None:
    path = tmp_path / "DESCRIPTION"
    path.write_text(DEFAULT_DESCRIPTION, encoding="utf-8")

    desc = DescriptionFile.read(path)
    desc.version = "1.1.0"
    desc.date = "2026-10-18"
    desc.write(path)

    assert path.read_text(encoding="utf-8") == DEFAULT_DESCRIPTION.replace(
        "Version: 1.0.0", "Version: 1.1.0"
    ).replace("Date: 2024-01-01", "Date: 2026-10-18")


def test_set_appends_new_field() -> None:
    desc = DescriptionFile.parse("Package: demo\nVersion: 0.1.0\n")

    desc.set("Date", "2026-10-18")

    assert desc.to_lines() == ["Package: demo", "Version: 0.1.0", "Date: 2026-10-18"]


def test_read_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingDescriptionError):
        DescriptionFile.read(tmp_path / "DESCRIPTION")


def test_parse_rejects_malformed_lines() -> None:
    with pytest.raises(DescriptionError):
        DescriptionFile.parse("Package demo\n")
    with pytest.raises(DescriptionError):
        DescriptionFile.parse("  orphan continuation\n")


def test_read_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "DESCRIPTION"
    path.write_bytes(b"Package: demo\nMaintainer: Jos\xe9\n")

    with pytest.raises(DescriptionError, match="not valid UTF-8"):
        DescriptionFile.read(path)


def test_parse_keeps_form_feed_inside_field() -> None:
    description = DescriptionFile.parse("Package: demo\nTitle: One\x0cTwo\nVersion: 1.0.0\n")

    assert description.get("Title") == "One\x0cTwo"
    assert description.version == "1.0.0"
