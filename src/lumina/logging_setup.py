# src/lumina/logging_setup.py

"""
Logging for the lumina package only.

stdout belongs to the conversation, so diagnostics go elsewhere:
- stderr gets bare messages ("Corrupt data entry: ..."), errors get a prefix,
  tracebacks are left out
- lumina.log in the data directory gets everything, timestamped, with tracebacks
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "lumina"
LOG_FILE_NAME = "lumina.log"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class _StderrFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return f"Error: {message}"
        return message


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_StderrFormatter())
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler | None:
    log_file = log_dir / LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as e:
        print(f"Error: file logging disabled ({log_file}: {e})", file=sys.stderr)
        return None
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(
    *,
    log_dir: str | Path = "data",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Attach stderr and file handlers to the "lumina" logger.

    Safe to call again: handlers from a previous call are replaced. The root
    logger is left alone.
    """
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(min(console_level, file_level))
    app_logger.propagate = False

    for old in list(app_logger.handlers):
        app_logger.removeHandler(old)
        old.close()

    app_logger.addHandler(_stderr_handler(console_level))
    fh = _file_handler(Path(log_dir), file_level)
    if fh is not None:
        app_logger.addHandler(fh)
    return app_logger
