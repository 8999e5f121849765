"""
Pydantic settings for environment-based configuration.

Example .env file:
    POSTMARK_SERVER_TOKEN=00000000-0000-0000-0000-000000000000
    POSTMARK_TIMEOUT=60
    POSTMARK_MAX_RETRIES=2
    POSTMARK_RETRY_BACKOFF=fixed
    POSTMARK_LOG_ENABLED=true
    POSTMARK_LOG_LEVEL=DEBUG
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostmarkSettings(BaseSettings):
    """
    Client configuration read from ``POSTMARK_*`` environment variables.

    Reads from (highest priority first):
    1. Environment variables
    2. .env file
    3. Defaults

    Usage:
        >>> settings = PostmarkSettings()
        >>> settings.request_host
        'api.postmarkapp.com'
    """

    model_config = SettingsConfigDict(
        env_prefix='POSTMARK_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Credentials
    server_token: Optional[SecretStr] = None
    account_token: Optional[SecretStr] = None

    # Endpoint
    base_url: Optional[str] = None
    request_host: str = Field(default="api.postmarkapp.com", min_length=1)
    use_https: bool = True

    # Transport
    timeout: float = Field(default=180.0, gt=0, description="Request timeout in seconds")

    # Retry
    max_retries: int = Field(default=3, ge=0, le=10)
    retry_backoff: Literal["exponential", "fixed"] = "exponential"
    retry_backoff_base: float = Field(default=0.5, ge=0)
    retry_backoff_max: float = Field(default=30.0, ge=0)
    retry_backoff_jitter: bool = True

    # Logging
    log_enabled: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text", "colored"] = "text"
    log_file_path: Optional[str] = None

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('retry_backoff', 'log_format', mode='before')
    @classmethod
    def normalize_lowercase(cls, v):
        return v.lower() if isinstance(v, str) else v
