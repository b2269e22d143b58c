"""Logging configuration for record search."""

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "record_search"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True,
    stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Configure root logging and the record_search package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string, overriding ``include_timestamp``
        include_timestamp: Prefix records with their creation time
        stream: Output stream (defaults to stdout)

    Returns:
        The package logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    if format_string is None:
        format_string = DEFAULT_FORMAT if include_timestamp else COMPACT_FORMAT

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        stream=stream or sys.stdout,
        force=True
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.debug(f"Logging configured with level: {level}")
    return package_logger


class StructuredLogger:
    """Logger that appends key=value context to every message."""

    def __init__(self, name: str, **context):
        self.logger = logging.getLogger(name)
        self.context = context

    def with_context(self, **kwargs) -> 'StructuredLogger':
        """Return a new logger carrying additional context."""
        return StructuredLogger(self.logger.name, **{**self.context, **kwargs})

    def _format_message(self, message: str) -> str:
        if not self.context:
            return message
        context_str = " ".join(f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}"
                               for k, v in self.context.items())
        return f"{message} [{context_str}]"

    def debug(self, message: str) -> None:
        # Skip formatting when the record would be dropped
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message))

    def info(self, message: str) -> None:
        self.logger.info(self._format_message(message))

    def warning(self, message: str) -> None:
        self.logger.warning(self._format_message(message))
