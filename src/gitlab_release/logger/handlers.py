"""Handler creation for the gitlab_release logging system.

The root logger only owns a QueueHandler; console and file handlers are
driven by a QueueListener thread so coroutines never block on handler I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from gitlab_release.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from gitlab_release.logger.formatters import HybridConsoleFormatter
from gitlab_release.logger.state import _LoggerState

ROOT_LOGGER_NAME = "gitlab_release"


class ConfigurationError(Exception):
    """Raised when a log handler cannot be created."""


def _level_number(name: str, default: int) -> int:
    return getattr(logging, name.upper(), default)


def build_console_handler(level: str) -> logging.Handler:
    """Return a stderr handler; stdout carries the release summary."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_number(level, logging.WARNING))
    handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT, datefmt=LOG_CONSOLE_DATE_FORMAT
        )
    )
    return handler


def build_file_handler(path: Path, level: str) -> logging.Handler:
    """Return a size-rotated handler writing to ``path``.

    Raises:
        ConfigurationError: If the directory or file cannot be opened

    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"cannot open log file {path}: {e}"
        raise ConfigurationError(msg) from e

    handler.setLevel(_level_number(level, logging.INFO))
    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    return handler


def setup_root_logger(
    state: _LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Attach a QueueHandler to the package root and start its listener.

    Any handler already on the root logger is closed first, so calling
    this again swaps the configuration instead of stacking handlers. If
    the log file cannot be opened, logging continues on the console only
    and a warning is emitted.

    Args:
        state: Shared logger state (see ``logger.state``)
        console_level: Level name for stderr output
        file_level: Level name for the log file
        log_file: Log file path, or None for console only

    """
    targets = [build_console_handler(console_level)]
    file_error: ConfigurationError | None = None
    if log_file is not None:
        try:
            targets.append(build_file_handler(log_file, file_level))
        except ConfigurationError as e:
            file_error = e

    root = logging.getLogger(ROOT_LOGGER_NAME)
    while root.handlers:
        old = root.handlers[0]
        root.removeHandler(old)
        old.close()
    # Level filtering happens on the listener's handlers.
    root.setLevel(logging.DEBUG)
    root.propagate = False

    log_queue: queue.Queue = queue.Queue()
    listener = QueueListener(log_queue, *targets, respect_handler_level=True)
    listener.start()
    root.addHandler(QueueHandler(log_queue))

    state.log_queue = log_queue
    state.queue_listener = listener
    state.root_initialized = True

    if file_error is not None:
        root.warning("File logging disabled: %s", file_error)
