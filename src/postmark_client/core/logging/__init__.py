"""
Logging system for the Postmark client.

Structured logging with JSON/text/colored output, rotating files,
per-call correlation ids and secret masking.

Example:
    >>> from postmark_client.core.logging import LoggingConfig
    >>> from postmark_client import ClientConfig, ServerClient
    >>>
    >>> config = ClientConfig.create(logging=LoggingConfig.create(level="DEBUG", format="json"))
    >>> client = ServerClient("server-token", config=config)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import LOGGER_NAMESPACE, PostmarkLogger
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "LOGGER_NAMESPACE",
    "PostmarkLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
