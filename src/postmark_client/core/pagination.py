"""Default count/offset for paginated list endpoints."""

from collections.abc import MutableMapping
from typing import TypeVar

DEFAULT_PAGINATION_COUNT = 100
DEFAULT_PAGINATION_OFFSET = 0

F = TypeVar("F")


def apply_default_pagination(filter: F) -> F:
    """
    Fill unset ``count``/``offset`` on a filter, in place.

    Only unset values (missing or None) are filled; an explicit value,
    including 0, is left alone. Filters without these fields pass through
    untouched.

    Args:
        filter: Filter model or mutable mapping

    Returns:
        The same object

    Example:
        >>> f = FilteringParameters(offset=0)
        >>> apply_default_pagination(f).count
        100
    """
    if isinstance(filter, MutableMapping):
        if filter.get("count") is None:
            filter["count"] = DEFAULT_PAGINATION_COUNT
        if filter.get("offset") is None:
            filter["offset"] = DEFAULT_PAGINATION_OFFSET
        return filter

    if hasattr(filter, "count") and getattr(filter, "count") is None:
        setattr(filter, "count", DEFAULT_PAGINATION_COUNT)
    if hasattr(filter, "offset") and getattr(filter, "offset") is None:
        setattr(filter, "offset", DEFAULT_PAGINATION_OFFSET)

    return filter
