"""CLI behaviour tests."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from rdevkit.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "code-summary", "-o", "out.txt"])
    assert args.verbose is True
    assert args.command == "code-summary"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["db-summary", "data.sqlite", "out.txt", "--verbose"])
    assert args.verbose is True
    assert args.rows is None


def test_cli_bump_collects_fixtures() -> None:
    parser = _build_parser()
    args = parser.parse_args(["bump", "fix a", "fix b", "--version", "minor"])
    assert args.fixtures == ["fix a", "fix b"]
    assert args.new_version == "minor"


def test_cli_rejects_negative_rows() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["db-summary", "data.sqlite", "out.txt", "--rows", "-1"])


def test_code_summary_command(project_builder, tmp_path: Path, capsys) -> None:
    project_builder.write({"R/a.R": "a <- 1\n"})
    output = tmp_path / "summary.txt"

    main(["code-summary", str(project_builder.path()), "--output", str(output)])

    assert "a <- 1" in output.read_text(encoding="utf-8")
    assert "Summary written to" in capsys.readouterr().out


def test_db_summary_command(tmp_path: Path) -> None:
    db_path = tmp_path / "data.sqlite"
    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE t (x INTEGER)")
    conn.executemany("INSERT INTO t VALUES (?)", [(i,) for i in range(8)])
    conn.commit()
    conn.close()
    output = tmp_path / "db.txt"

    main(["db-summary", str(db_path), str(output), "--rows", "2"])

    text = output.read_text(encoding="utf-8")
    assert "TABLE DATA PREVIEWS (First 2 Rows)" in text
    assert "Table: t" in text


def test_db_summary_missing_database_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["db-summary", str(tmp_path / "nope.sqlite"), str(tmp_path / "db.txt")])
    assert excinfo.value.code == 1


def test_bump_command_with_version(project_builder, capsys) -> None:
    project_builder.with_description()

    main(["bump", "fix `x`", "--path", str(project_builder.path()), "--version", "1.0.5"])

    assert "Version: 1.0.5" in project_builder.read("DESCRIPTION")
    assert "fix x" in capsys.readouterr().out


def test_bump_command_declined(project_builder, capsys, monkeypatch) -> None:
    project_builder.with_description()
    monkeypatch.setattr("builtins.input", lambda prompt: "0")

    main(["bump", "fix", "--path", str(project_builder.path())])

    assert "No version chosen; nothing changed." in capsys.readouterr().out
    assert "Version: 1.0.0" in project_builder.read("DESCRIPTION")


def test_bump_outside_project_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["bump", "fix", "--path", str(tmp_path), "--version", "patch"])
    assert excinfo.value.code == 1


def test_bump_with_undecodable_news_exits_cleanly(project_builder, capsys) -> None:
    project_builder.with_description()
    (project_builder.path() / "NEWS.md").write_bytes(b"* caf\xe9\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["bump", "fix", "--path", str(project_builder.path()), "--version", "patch"])

    assert excinfo.value.code == 1
    assert "NEWS.md is not valid UTF-8" in capsys.readouterr().err
    assert "Version: 1.0.0" in project_builder.read("DESCRIPTION")
