"""
Main logger for the Postmark client.

Wraps a stdlib logger, installs handlers/filters from ``LoggingConfig``
and masks secrets in every structured field before it is emitted.
"""

import itertools
import logging
from typing import Any, List, Optional

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler
from ...utils.sanitizer import mask_sensitive_data

LOGGER_NAMESPACE = "postmark_client"

_instance_ids = itertools.count(1)


class PostmarkLogger:
    """
    Structured logger.

    Keyword arguments become record fields; values under sensitive keys
    (tokens, passwords, auth headers) are replaced with ``***REDACTED***``.

    Example:
        >>> logger = PostmarkLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request completed", method="POST", path="/email", attempt=1)
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: Optional[str] = None):
        """
        Args:
            config: Logging configuration (uses defaults if None)
            name: Logger name (default: a per-instance child of ``postmark_client``)
        """
        self.config = config or LoggingConfig()
        self.name = name or f"{LOGGER_NAMESPACE}.client.{next(_instance_ids)}"
        self._closed = False
        self._handlers: List[logging.Handler] = []

        self._logger = logging.getLogger(self.name)
        self._logger.setLevel(self._get_level(self.config.level))
        self._logger.propagate = False

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)
        level = self._get_level(self.config.level)

        if self.config.enable_console:
            self._add_handler(create_console_handler(level, formatter, filters))

        if self.config.enable_file and self.config.file_path:
            self._add_handler(create_file_handler(
                file_path=self.config.file_path,
                level=level,
                formatter=formatter,
                max_bytes=self.config.max_bytes,
                backup_count=self.config.backup_count,
                filters=filters
            ))

    def _add_handler(self, handler: logging.Handler) -> None:
        self._handlers.append(handler)
        self._logger.addHandler(handler)

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    def _log(self, level: int, message: str, fields: dict) -> None:
        self._logger.log(level, message, extra=mask_sensitive_data(fields))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    @property
    def handlers(self):
        return list(self._logger.handlers)

    def close(self) -> None:
        """
        Flush, close and detach the handlers this instance installed. Idempotent.

        Example:
            >>> with PostmarkLogger(config) as logger:
            ...     logger.info("Processing...")
        """
        if self._closed:
            return

        for handler in self._handlers:
            try:
                handler.flush()
                handler.close()
            except (OSError, ValueError):
                pass
            self._logger.removeHandler(handler)

        self._handlers = []
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
