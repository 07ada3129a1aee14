"""Console formatters for the gitlab_release logging system.

- ColoredConsoleFormatter: ANSI colored level names
- HybridConsoleFormatter: bare message for INFO, colored structure otherwise

INFO records are what the CLI shows as progress, so they stay unadorned;
warnings and errors keep timestamp and logger name.
"""

import logging

from gitlab_release.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for log level names."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a colored level name.

        The level name is swapped on the record only for the duration of
        the call and restored afterwards.

        Args:
            record: The log record to format

        Returns:
            Formatted log message

        """
        if record.levelname not in LOG_COLORS:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = (
            f"{LOG_COLORS[original_levelname]}{original_levelname}"
            f"{LOG_COLORS['RESET']}"
        )
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class HybridConsoleFormatter(logging.Formatter):
    """Plain message for INFO records, colored structured format otherwise.

    Example Output:
        INFO:     "Uploading 2 file(s)"
        WARNING:  "12:30:45 - gitlab_release.workflow - WARNING - ..."

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for non-INFO records
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record according to its level."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
