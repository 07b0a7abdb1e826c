"""CLI entrypoints for rdevkit commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .code import summarise_package_code
from .config import load_config
from .db import open_source, summarise_db_content
from .errors import RdevkitError
from .logging import configure_logging
from .meta import FixedVersionChooser, PromptVersionChooser, update_package_meta


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdevkit",
        description="Summaries and release bookkeeping for R package projects.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    db_parser = subparsers.add_parser(
        "db-summary",
        help="Write the table list and a preview of every table to a text file.",
    )
    _add_verbose_option(db_parser, suppress_default=True)
    db_parser.add_argument(
        "database",
        help="SQLite database file or postgresql:// connection string.",
    )
    db_parser.add_argument("output", help="Path of the text file to write.")
    db_parser.add_argument(
        "--rows",
        type=_non_negative_int,
        default=None,
        help="Number of rows to preview per table (defaults to config or 5).",
    )

    code_parser = subparsers.add_parser(
        "code-summary",
        help="Write the directory tree and R sources of a package to a text file.",
    )
    _add_verbose_option(code_parser, suppress_default=True)
    code_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the package root (defaults to current directory).",
    )
    code_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Path of the text file to write.",
    )

    bump_parser = subparsers.add_parser(
        "bump",
        help="Bump DESCRIPTION version/date and prepend a NEWS.md entry.",
    )
    _add_verbose_option(bump_parser, suppress_default=True)
    bump_parser.add_argument(
        "fixtures",
        nargs="+",
        help="Fixes and features to list in NEWS.md.",
    )
    bump_parser.add_argument(
        "--path",
        default=".",
        help="Path to the package root (defaults to current directory).",
    )
    bump_parser.add_argument(
        "--version",
        dest="new_version",
        default=None,
        help="New version or one of major/minor/patch/dev; prompts when omitted.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for rdevkit commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        if args.command == "db-summary":
            _run_db_summary(args)
        elif args.command == "code-summary":
            output = summarise_package_code(args.path, args.output)
            print(f"Summary written to {_relativize(output)}")
        elif args.command == "bump":
            _run_bump(args)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (RdevkitError, OSError) as exc:
        parser.exit(1, f"rdevkit {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _run_db_summary(args: argparse.Namespace) -> None:
    rows = args.rows
    if rows is None:
        rows = load_config(Path.cwd()).db.preview_rows
    source = open_source(args.database)
    try:
        output = summarise_db_content(source, args.output, preview_rows=rows)
    finally:
        source.close()
    print(f"Database summary written to {_relativize(output)}")


def _run_bump(args: argparse.Namespace) -> None:
    chooser = (
        FixedVersionChooser(args.new_version)
        if args.new_version
        else PromptVersionChooser()
    )
    result = update_package_meta(args.fixtures, root=args.path, chooser=chooser)
    if result is None:
        print("No version chosen; nothing changed.")
        return
    print(f"Version {result.version} recorded in {_relativize(result.changelog_path)}")
    print(result.commit_message)


def _relativize(path: Path) -> str:
    try:
        return str(Path(path).resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
