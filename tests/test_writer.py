"""Tests for rdevkit.writer."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from rdevkit import writer
from rdevkit.writer import banner, read_lines, split_lines, write_lines


def test_write_lines_creates_parents_and_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "out.txt"

    write_lines(target, ["first", "second"])
    write_lines(target, ["third"])

    assert target.read_text(encoding="utf-8") == "third\n"
    assert read_lines(target) == ["third"]
    assert [p.name for p in target.parent.iterdir()] == ["out.txt"]


def test_write_lines_keeps_existing_mode(tmp_path: Path) -> None:
    target = tmp_path / "script.txt"
    target.write_text("old\n", encoding="utf-8")
    os.chmod(target, 0o640)

    write_lines(target, ["new"])

    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_failed_write_leaves_original(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "out.txt"
    target.write_text("original\n", encoding="utf-8")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(writer.os, "replace", _fail)

    with pytest.raises(OSError):
        write_lines(target, ["partial"])

    assert target.read_text(encoding="utf-8") == "original\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]


def test_read_lines_empty_file(tmp_path: Path) -> None:
    target = tmp_path / "empty.md"
    target.touch()
    assert read_lines(target) == []


def test_banner() -> None:
    assert banner("TITLE") == ["=" * 50, "TITLE", "=" * 50]


def test_split_lines_breaks_on_newline_only() -> None:
    text = "a\x0cb\x1cc\x1dd\x1ee\x85f\u2028g\u2029h\r\nnext\n"

    assert split_lines(text) == ["a\x0cb\x1cc\x1dd\x1ee\x85f\u2028g\u2029h", "next"]


def test_split_lines_keeps_interior_blank_lines() -> None:
    assert split_lines("") == []
    assert split_lines("\n") == [""]
    assert split_lines("x\n\n") == ["x", ""]
    assert split_lines("x\n\ny") == ["x", "", "y"]
