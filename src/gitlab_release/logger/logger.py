"""Public API of the gitlab_release logging system.

- setup_logging(): initialize the root logger once, return a named logger
- get_logger(): convenience wrapper used by every module
- reconfigure_logging(): rebuild handlers from loaded settings
- set_console_level(): adjust console verbosity at runtime
- flush_all_handlers() / clear_logger_state(): shutdown and test helpers
"""

import atexit
import contextlib
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gitlab_release.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)
from gitlab_release.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from gitlab_release.logger.state import get_state


def _default_log_file() -> Path | None:
    """Return the log file path from GLR_LOG_DIR, if set."""
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return None


def flush_all_handlers() -> None:
    """Wait for the log queue to drain and flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.time() + 5.0
    while not state.log_queue.empty() and time.time() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _stop_listener() -> None:
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        for handler in state.queue_listener.handlers:
            handler.close()
        state.queue_listener = None
    state.log_queue = None
    state.root_initialized = False


atexit.register(_stop_listener)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the logger for ``name``.

    The root ``gitlab_release`` logger is initialized on first call only;
    later calls just return ``logging.getLogger(name)``. Child loggers
    propagate to the root, which is the only logger with a handler.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level name (default WARNING)
        file_level: File log level name (default INFO)
        log_file: Log file path (default from GLR_LOG_DIR, else no file)

    Returns:
        Logger instance

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            setup_root_logger(
                state,
                console_level or DEFAULT_CONSOLE_LOG_LEVEL,
                file_level or DEFAULT_LOG_LEVEL,
                log_file or _default_log_file(),
            )
    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger within the gitlab_release hierarchy.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Uploading %s", path)

    """
    return setup_logging(name=name)


def reconfigure_logging(
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Rebuild root handlers, e.g. after settings have been loaded.

    Args:
        console_level: Console log level name
        file_level: File log level name
        log_file: Log file path; falls back to GLR_LOG_DIR when None

    """
    state = get_state()
    with state.lock:
        _stop_listener()
        setup_root_logger(
            state,
            console_level,
            file_level,
            log_file or _default_log_file(),
        )


def set_console_level(level: str) -> None:
    """Set the level of the console handler only."""
    state = get_state()
    if state.queue_listener is None:
        return
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            handler.setLevel(getattr(logging, level.upper(), logging.WARNING))


def clear_logger_state() -> None:
    """Reset all logger state. Intended for tests only."""
    state = get_state()
    with state.lock:
        _stop_listener()
        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
