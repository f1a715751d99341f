"""
Lightweight logging setup for AntFarm.

One shared logger named "AntFarm". Console output goes to stderr so that
stdout carries nothing but the echoed farm and the move transcript.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


_LOGGER_NAME = "AntFarm"
_CONSOLE_FORMAT = "%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def _level(debug: bool) -> int:
    return logging.DEBUG if debug else logging.INFO


def setup_logging(debug: bool = False) -> logging.Logger:
    """Return the project logger with a stderr handler attached once."""
    logger = logging.getLogger(_LOGGER_NAME)
    level = _level(debug)
    logger.setLevel(level)
    logger.propagate = False
    console = [h for h in logger.handlers if isinstance(h, _StderrHandler)]
    if console:
        for handler in console:
            handler.setLevel(level)
        return logger

    ch = _StderrHandler(level)
    ch.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(ch)

    logger.debug("Logger initialized. Level=%s", logging.getLevelName(level))
    return logger


def get_logger() -> logging.Logger:
    """Return the shared project logger (setup_logging() attaches the handlers)."""
    return logging.getLogger(_LOGGER_NAME)


def add_file_handler(path: Path | str, level: Optional[int] = None) -> None:
    """Mirror the log into ``path`` (one handler per distinct file)."""
    logger = get_logger()
    log_path = str(Path(path).resolve())
    if any(getattr(h, "baseFilename", None) == log_path for h in logger.handlers):
        return
    Path(log_path).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(level or logger.level or logging.INFO)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(handler)
    logger.debug("Added extra log handler @ %s", log_path)


def remove_file_handlers() -> None:
    """Close and detach every file handler, e.g. between batch runs."""
    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
