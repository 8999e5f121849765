"""
Secret masking for configuration summaries.
"""

from typing import Optional


def mask_secret(value: Optional[str], visible_chars: int = 4) -> str:
    """
    Show the first and last few characters of a secret, mask the middle.

    Example:
        >>> mask_secret("a1b2c3d4-0000-0000-0000-e5f6a7b8c9d0")
        'a1b2***c9d0'
        >>> mask_secret("short", visible_chars=4)
        '***'
    """
    if not value:
        return ""

    if len(value) <= visible_chars * 2:
        return "***"

    return f"{value[:visible_chars]}***{value[-visible_chars:]}"
