"""Utility modules for the Postmark client."""

from .sanitizer import mask_sensitive_data

__all__ = [
    'mask_sensitive_data',
]
