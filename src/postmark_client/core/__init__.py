"""Core модули Postmark клиента: конфигурация, исполнение запросов, retry, ошибки."""

from .config import (
    BackoffStrategy,
    ClientConfig,
    RetryConfig,
    TimeoutConfig,
)
from .request import Credential, HttpMethod, RequestDescriptor, Route
from .executor import RequestExecutor
from .retry_engine import RetryController, RetryEngine
from .pagination import (
    DEFAULT_PAGINATION_COUNT,
    DEFAULT_PAGINATION_OFFSET,
    apply_default_pagination,
)
from .exceptions import (
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
    classify_response,
    classify_transport_error,
)
from .base_client import BaseClient

__all__ = [
    # Config
    "BackoffStrategy",
    "ClientConfig",
    "RetryConfig",
    "TimeoutConfig",
    # Requests
    "Credential",
    "HttpMethod",
    "RequestDescriptor",
    "Route",
    "RequestExecutor",
    "RetryController",
    "RetryEngine",
    "DEFAULT_PAGINATION_COUNT",
    "DEFAULT_PAGINATION_OFFSET",
    "apply_default_pagination",
    "BaseClient",
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
    "classify_response",
    "classify_transport_error",
]
