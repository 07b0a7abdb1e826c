"""Tests for rdevkit.logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rdevkit.logging import SUCCESS, configure_logging, get_logger, notify


def test_get_logger_is_namespaced() -> None:
    assert get_logger().name == "rdevkit"
    assert get_logger("db").name == "rdevkit.db"


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"

    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    get_logger("code").debug("tree rendered")
    for handler in logger.handlers:
        handler.flush()
    assert "rdevkit.code: tree rendered" in log_file.read_text(encoding="utf-8")


def test_notify_maps_kinds_to_levels(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("rdevkit"), "propagate", True)
    logger = get_logger("meta")

    with caplog.at_level(logging.INFO, logger="rdevkit"):
        notify(logger, "success", "done %s", "x")
        notify(logger, "caution", "careful")
        notify(logger, "info", "fyi")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (SUCCESS, "done x"),
        (logging.WARNING, "careful"),
        (logging.INFO, "fyi"),
    ]
    assert caplog.records[0].levelname == "SUCCESS"


def test_notify_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        notify(get_logger(), "shout", "hi")
