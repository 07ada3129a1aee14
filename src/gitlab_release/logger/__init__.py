"""Logging utilities for gitlab-release.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener thread
                                                 |
                                      Console (+ rotating file) handlers

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Use %-formatting in log calls, never f-strings
    4. Handlers live only on the root 'gitlab_release' logger

Environment Variables:
    GLR_LOG_DIR: enables file logging to $GLR_LOG_DIR/glr.log
"""

from gitlab_release.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from gitlab_release.logger.handlers import ConfigurationError
from gitlab_release.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    reconfigure_logging,
    set_console_level,
    setup_logging,
)

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "reconfigure_logging",
    "set_console_level",
    "setup_logging",
]
