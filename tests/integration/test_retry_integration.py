"""
Integration tests for retry behaviour across the full client stack.

Backoff is disabled (base 0, no jitter) so retries happen without sleeping.
"""

import json

import httpx
import pytest

from postmark_client import AccountClient, ServerClient
from postmark_client.core.config import ClientConfig, RetryConfig
from postmark_client.core.exceptions import (
    ApiInputError,
    ClientError,
    ConnectionError,
    InternalServerError,
    RateLimitExceededError,
    ServiceUnavailableError,
)
from postmark_client.core.retry_engine import RetryEngine

BASE_URL = "https://api.postmarkapp.com"
MESSAGE = {"From": "sender@example.com", "To": "receiver@example.com", "TextBody": "Hi"}

pytestmark = pytest.mark.integration


def _client(**retry_kwargs):
    retry_kwargs.setdefault("backoff_base", 0)
    retry_kwargs.setdefault("backoff_jitter", False)
    return ServerClient("server-token", ClientConfig.create(retry=RetryConfig(**retry_kwargs)))


@pytest.mark.asyncio
async def test_persistent_server_error_exhausts_attempts(respx_mock):
    route = respx_mock.post(f"{BASE_URL}/email").mock(
        return_value=httpx.Response(500, json={"ErrorCode": 0, "Message": "Internal error"})
    )

    async with _client(max_retries=3) as client:
        with pytest.raises(InternalServerError) as exc_info:
            await client.send_email(MESSAGE)

    assert route.call_count == 4
    assert exc_info.value.message == "Internal error"


@pytest.mark.asyncio
async def test_zero_retries_single_attempt(respx_mock):
    route = respx_mock.post(f"{BASE_URL}/email").mock(return_value=httpx.Response(503))

    async with _client(max_retries=0) as client:
        with pytest.raises(ServiceUnavailableError):
            await client.send_email(MESSAGE)

    assert route.call_count == 1


@pytest.mark.asyncio
async def test_recovers_after_transient_failures(respx_mock):
    route = respx_mock.post(f"{BASE_URL}/email").mock(side_effect=[
        httpx.Response(503, json={"ErrorCode": 0, "Message": "Unavailable"}),
        httpx.ConnectError("connection reset"),
        httpx.Response(200, json={"MessageID": "abc", "ErrorCode": 0, "Message": "OK"}),
    ])

    async with _client(max_retries=3) as client:
        response = await client.send_email(MESSAGE)

    assert response.message_id == "abc"
    assert route.call_count == 3
    # the same request is resent unchanged
    bodies = [json.loads(call.request.content) for call in route.calls]
    assert bodies == [MESSAGE, MESSAGE, MESSAGE]


@pytest.mark.asyncio
async def test_client_error_not_retried(respx_mock):
    route = respx_mock.post(f"{BASE_URL}/email").mock(
        return_value=httpx.Response(422, json={"ErrorCode": 300, "Message": "Invalid email request"})
    )

    async with _client(max_retries=3) as client:
        with pytest.raises(ApiInputError):
            await client.send_email(MESSAGE)

    assert route.call_count == 1


@pytest.mark.asyncio
async def test_network_errors_exhaust_to_last_error(respx_mock):
    route = respx_mock.get(f"{BASE_URL}/server").mock(side_effect=httpx.ConnectError("refused"))

    async with _client(max_retries=2) as client:
        with pytest.raises(ConnectionError) as exc_info:
            await client.get_server()

    assert route.call_count == 3
    assert exc_info.value.status_code == 0


@pytest.mark.asyncio
async def test_custom_retryable_status_set(respx_mock):
    conflict = respx_mock.get(f"{BASE_URL}/server").mock(
        return_value=httpx.Response(409, json={"ErrorCode": 0, "Message": "Conflict"})
    )

    async with _client(max_retries=2, retryable_status_codes={409}) as client:
        with pytest.raises(ClientError):
            await client.get_server()
    assert conflict.call_count == 3

    unavailable = respx_mock.get(f"{BASE_URL}/bounces/1").mock(return_value=httpx.Response(503))

    async with _client(max_retries=2, retryable_status_codes={409}) as client:
        with pytest.raises(ServiceUnavailableError):
            await client.get_bounce(1)
    assert unavailable.call_count == 1


@pytest.mark.asyncio
async def test_rate_limit_honors_retry_after(respx_mock, monkeypatch):
    waits = []
    get_wait_time = RetryEngine.get_wait_time

    def recording_wait_time(self, error=None):
        wait = get_wait_time(self, error)
        waits.append(wait)
        return wait

    monkeypatch.setattr(RetryEngine, "get_wait_time", recording_wait_time)
    respx_mock.get(f"{BASE_URL}/server").mock(side_effect=[
        httpx.Response(429, headers={"Retry-After": "0.01"},
                       json={"ErrorCode": 0, "Message": "Rate limit exceeded"}),
        httpx.Response(200, json={"ID": 1}),
    ])

    async with _client(max_retries=1, backoff_base=5) as client:
        server = await client.get_server()

    assert server.id == 1
    assert waits == [0.01]


@pytest.mark.asyncio
async def test_rate_limit_exhausted(respx_mock):
    respx_mock.get(f"{BASE_URL}/server").mock(
        return_value=httpx.Response(429, json={"ErrorCode": 0, "Message": "Slow down"})
    )

    async with _client(max_retries=1) as client:
        with pytest.raises(RateLimitExceededError):
            await client.get_server()


@pytest.mark.asyncio
async def test_retries_logged_with_masked_token(respx_mock, logging_config):
    respx_mock.get(f"{BASE_URL}/server").mock(side_effect=[
        httpx.Response(502),
        httpx.Response(200, json={"ID": 1}),
    ])
    retry = RetryConfig(max_retries=1, backoff_base=0, backoff_jitter=False)
    config = ClientConfig.create(retry=retry, logging=logging_config)

    async with ServerClient("server-secret-token", config) as client:
        await client.get_server()

    with open(logging_config.file_path, encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]

    messages = [r["message"] for r in records]
    assert "Request error (will retry)" in messages
    assert "Request completed" in messages
    assert all("correlation_id" in r for r in records)
    assert len({r["correlation_id"] for r in records}) == 1
    with open(logging_config.file_path, encoding="utf-8") as f:
        assert "server-secret-token" not in f.read()


@pytest.mark.asyncio
async def test_closing_one_client_keeps_other_logging(respx_mock, logging_config):
    respx_mock.get(f"{BASE_URL}/server").mock(return_value=httpx.Response(200, json={"ID": 1}))
    config = ClientConfig.create(logging=logging_config)

    server = ServerClient("server-token", config)
    account = AccountClient("account-token", config)
    await account.close()

    await server.get_server()
    await server.close()

    with open(logging_config.file_path, encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]
    assert [r["message"] for r in records] == ["Request completed"]
