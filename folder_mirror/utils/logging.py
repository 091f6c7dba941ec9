"""Logging configuration for Folder Mirror.

Two kinds of output:
- The sync log: an append-only file of "<timestamp>: <message>" lines, one per
  copied or deleted file, mirrored to stdout as it is written.
- Diagnostics: cycle summaries and failures, written to stderr through the
  standard logging hierarchy.
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional, Union


# Default format for diagnostic output
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Sync log line: "<timestamp>: <message>"
SYNC_LOG_FORMAT = "%(asctime)s: %(message)s"

SYNC_LOGGER_PREFIX = "folder_mirror.sync_log"


class SyncLogFormatter(logging.Formatter):
    """Format sync log lines with timestamps that never go backwards.

    If the wall clock steps back, entries keep the latest timestamp seen.
    """

    def __init__(self):
        super().__init__(SYNC_LOG_FORMAT, DATE_FORMAT)
        self._last_created = 0.0

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        self._last_created = max(self._last_created, record.created)
        return time.strftime(datefmt or DATE_FORMAT, time.localtime(self._last_created))


class AppendOnlyFileHandler(logging.FileHandler):
    """File handler that only appends and lets write errors reach the caller."""

    def __init__(self, filename: Union[str, Path]):
        super().__init__(filename, mode="a", encoding="utf-8")

    def handleError(self, record: logging.LogRecord) -> None:
        # Called from inside the handler's except block
        raise


def get_sync_logger(
    log_file: Union[str, Path],
    console: bool = True
) -> logging.Logger:
    """Get the sync log writer for a log file.

    Args:
        log_file: Path of the append-only sync log
        console: If True, also print every line to stdout

    Returns:
        Configured logger; one instance per log file

    Example:
        >>> sync_log = get_sync_logger("/var/log/mirror.log")
        >>> sync_log.info("Copied: a/x.txt")  # 2026-10-18 12:00:00: Copied: a/x.txt
    """
    log_file = Path(log_file)
    name = f"{SYNC_LOGGER_PREFIX}.{os.path.abspath(log_file)}"
    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    logger.propagate = False

    formatter = SyncLogFormatter()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = AppendOnlyFileHandler(log_file)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def close_sync_logger(logger: logging.Logger) -> None:
    """Flush, close and detach all handlers of a sync logger."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger for diagnostics.

    Call this once at application startup.

    Args:
        level: Default logging level
    """
    root_logger = logging.getLogger()

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(TEXT_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)
