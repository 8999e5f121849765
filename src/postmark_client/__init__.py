"""Postmark client library - async clients for the Postmark email API."""

import logging

from .core.base_client import CLIENT_VERSION
from .account_client import AccountClient, AdminClient
from .server_client import Client, ServerClient
from .core.config import BackoffStrategy, ClientConfig, RetryConfig, TimeoutConfig
from .core.env_config import load_from_env, print_config_summary
from .core.logging import LoggingConfig, LogFormat, LogLevel
from .core.exceptions import (
    NETWORK_ERROR_CODE,
    PostmarkError,
    TemporaryError,
    FatalError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    RateLimitExceededError,
    ServerError,
    InternalServerError,
    ServiceUnavailableError,
    ClientError,
    InvalidAPIKeyError,
    NotFoundError,
    ApiInputError,
    InvalidEmailRequestError,
    InactiveRecipientsError,
    UnexpectedStatusError,
    SerializationError,
    ConfigurationError,
)
from . import models

# Set up logging - add NullHandler to prevent "No handler found" warnings
# Users can configure logging themselves using logging.getLogger('postmark_client')
logging.getLogger('postmark_client').addHandler(logging.NullHandler())

__version__ = CLIENT_VERSION

__all__ = [
    # Clients
    "ServerClient",
    "AccountClient",
    "Client",
    "AdminClient",
    # Config
    "ClientConfig",
    "TimeoutConfig",
    "RetryConfig",
    "BackoffStrategy",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "load_from_env",
    "print_config_summary",
    # Exceptions
    "NETWORK_ERROR_CODE",
    "PostmarkError",
    "TemporaryError",
    "FatalError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "RateLimitExceededError",
    "ServerError",
    "InternalServerError",
    "ServiceUnavailableError",
    "ClientError",
    "InvalidAPIKeyError",
    "NotFoundError",
    "ApiInputError",
    "InvalidEmailRequestError",
    "InactiveRecipientsError",
    "UnexpectedStatusError",
    "SerializationError",
    "ConfigurationError",
    # Models
    "models",
    # Version
    "__version__",
]
