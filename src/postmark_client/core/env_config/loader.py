"""
Configuration loader from environment variables and .env files.
"""

from typing import Optional, Tuple

from ..config import ClientConfig, RetryConfig, TimeoutConfig
from ..logging.config import LoggingConfig
from .secrets import mask_secret
from .settings import PostmarkSettings


def load_settings(env_file: Optional[str] = ".env", **overrides) -> PostmarkSettings:
    """
    Read ``PostmarkSettings``; ``env_file=None`` ignores .env files.

    Overrides are passed as init arguments, so they win over the
    environment and go through the same validation.

    Raises:
        ValueError: Unknown override name or invalid value
    """
    unknown = sorted(set(overrides) - set(PostmarkSettings.model_fields))
    if unknown:
        raise ValueError(f"Unknown configuration override(s): {', '.join(unknown)}")
    return PostmarkSettings(_env_file=env_file, **overrides)


def load_from_env(
    env_file: Optional[str] = ".env",
    **overrides
) -> ClientConfig:
    """
    Load ClientConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters (same names as PostmarkSettings fields)
    2. Environment variables (POSTMARK_*)
    3. .env file
    4. Defaults

    Args:
        env_file: .env file path (None to skip)
        **overrides: Explicit config overrides

    Raises:
        ValueError: Unknown override name or invalid value

    Returns:
        ClientConfig instance

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(max_retries=0, timeout=30)
    """
    config, _ = build_config(load_settings(env_file, **overrides))
    return config


def build_config(settings: PostmarkSettings) -> Tuple[ClientConfig, PostmarkSettings]:
    """Turn settings into a ``ClientConfig``; returns both."""
    retry = RetryConfig(
        max_retries=settings.max_retries,
        backoff=settings.retry_backoff,
        backoff_base=settings.retry_backoff_base,
        backoff_max=settings.retry_backoff_max,
        backoff_jitter=settings.retry_backoff_jitter,
    )

    logging_config = None
    if settings.log_enabled:
        logging_config = LoggingConfig.create(
            level=settings.log_level,
            format=settings.log_format,
            enable_file=bool(settings.log_file_path),
            file_path=settings.log_file_path,
        )

    config = ClientConfig(
        request_host=settings.request_host,
        use_https=settings.use_https,
        base_url=settings.base_url or None,
        timeout=TimeoutConfig(total=settings.timeout),
        retry=retry,
        logging=logging_config,
    )
    return config, settings


def print_config_summary(config: ClientConfig, settings: Optional[PostmarkSettings] = None):
    """
    Print the effective configuration; tokens are masked.

    Example:
        >>> print_config_summary(load_from_env(), load_settings())
        ClientConfig:
          base_url: https://api.postmarkapp.com
          timeout: 180.0s
          retry: max_retries=3, backoff=exponential(base=0.5s, max=30.0s, jitter=True)
          ...
    """
    retry = config.retry
    print("ClientConfig:")
    print(f"  base_url: {config.base_url}")
    print(f"  timeout: {config.timeout.total}s")
    print(
        f"  retry: max_retries={retry.max_retries}, "
        f"backoff={retry.backoff.value}(base={retry.backoff_base}s, max={retry.backoff_max}s, "
        f"jitter={retry.backoff_jitter})"
    )
    print(f"  retryable_status_codes: {sorted(retry.retryable_status_codes)}")

    if config.logging:
        print(f"  logging: level={config.logging.level.value}, format={config.logging.format.value}")
        if config.logging.enable_file:
            print(f"    file: {config.logging.file_path}")

    if settings is not None:
        for name in ("server_token", "account_token"):
            secret = getattr(settings, name)
            if secret is not None:
                print(f"  {name}: {mask_secret(secret.get_secret_value())}")
