"""
Environment configuration for the Postmark client.

Example:
    >>> from postmark_client.core.env_config import load_from_env
    >>> config = load_from_env()
    >>> config = load_from_env(max_retries=0)
"""

from .loader import build_config, load_from_env, load_settings, print_config_summary
from .settings import PostmarkSettings
from .secrets import mask_secret

__all__ = [
    "build_config",
    "load_from_env",
    "load_settings",
    "print_config_summary",
    "PostmarkSettings",
    "mask_secret",
]
