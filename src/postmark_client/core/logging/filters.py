"""
Log filters adding call context to records.

The correlation id lives in a ``ContextVar``: every asyncio task gets its
own copy, so concurrent calls on one client never see each other's id.
"""

import logging
from contextvars import ContextVar
from typing import Dict, Any, Optional


_correlation_id: ContextVar[Optional[str]] = ContextVar("postmark_correlation_id", default=None)


def set_correlation_id(correlation_id: str) -> None:
    """
    Set correlation ID for the current task.

    Example:
        >>> set_correlation_id("req-12345")
        >>> logger.info("Sending email")  # record carries correlation_id
    """
    _correlation_id.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Correlation ID of the current task, or None."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Forget the correlation ID of the current task."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Adds ``correlation_id`` to records when one is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """
    Adds static fields (service, environment...) to every record.

    Fields already present on the record win.

    Example:
        >>> handler.addFilter(ExtraFieldsFilter({"service": "billing"}))
    """

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
