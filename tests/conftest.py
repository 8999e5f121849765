"""
Pytest configuration and fixtures for postmark-client tests.
"""

import pytest
import pytest_asyncio

from postmark_client import AccountClient, ServerClient
from postmark_client.core.config import ClientConfig, RetryConfig
from postmark_client.core.logging.config import LoggingConfig


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.postmarkapp.com"


@pytest.fixture
def no_wait_retry():
    """RetryConfig without backoff delays (tests never sleep)."""
    return RetryConfig(max_retries=3, backoff_base=0, backoff_jitter=False)


@pytest.fixture
def client_config(no_wait_retry):
    return ClientConfig.create(retry=no_wait_retry)


@pytest_asyncio.fixture
async def server_client(client_config):
    """ServerClient instance for testing."""
    client = ServerClient("server-token", client_config)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def account_client(client_config):
    """AccountClient instance for testing."""
    client = AccountClient("account-token", client_config)
    yield client
    await client.close()


@pytest.fixture
def logging_config(tmp_path):
    """
    LoggingConfig writing JSON lines to a temporary file.

    Example:
        def test_with_logging(logging_config):
            config = ClientConfig.create(logging=logging_config)
    """
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "postmark.log"),
    )
