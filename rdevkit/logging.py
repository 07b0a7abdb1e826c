"""Logging utilities for rdevkit commands.

Operator-facing notices come in three kinds: ``success`` for a completed step,
``caution`` for something the operator should act on, and ``info`` for
everything else. They map onto log levels so one handler set serves both
notices and diagnostics.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "rdevkit"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

NOTICE_LEVELS = {
    "success": SUCCESS,
    "caution": logging.WARNING,
    "info": logging.INFO,
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the rdevkit hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def notify(logger: logging.Logger, kind: str, message: str, *args: object) -> None:
    """Emit an operator notice of the given kind."""
    try:
        level = NOTICE_LEVELS[kind]
    except KeyError:
        raise ValueError(f"Unknown notice kind {kind!r}") from None
    logger.log(level, message, *args)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send rdevkit notices to the console and, optionally, a log file.

    ``verbose`` adds debug diagnostics. Reconfiguring replaces earlier handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[rdevkit] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["NOTICE_LEVELS", "SUCCESS", "configure_logging", "get_logger", "notify"]
