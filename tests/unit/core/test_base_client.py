"""Тесты BaseClient: токен, заголовки, callback, фильтры."""

import httpx
import pytest

from postmark_client import AccountClient, ServerClient
from postmark_client.core.base_client import USER_AGENT
from postmark_client.core.config import ClientConfig, RetryConfig
from postmark_client.core.exceptions import (
    ApiInputError,
    ConfigurationError,
    NotFoundError,
    SerializationError,
)
from postmark_client.models import BounceFilteringParameters, OutboundMessageOpensFilteringParameters

BASE_URL = "https://api.postmarkapp.com"


class TestBaseClientInit:
    @pytest.mark.parametrize("token", ["", "   ", None])
    def test_empty_token_rejected(self, token):
        with pytest.raises(ConfigurationError):
            ServerClient(token)

    def test_account_client_empty_token_rejected(self):
        with pytest.raises(ConfigurationError):
            AccountClient("")

    def test_kwargs_build_config(self):
        client = ServerClient("token", timeout=30, max_retries=1)
        assert client.config.timeout.total == 30.0
        assert client.config.retry.max_retries == 1

    def test_invalid_kwargs_raise_configuration_error(self):
        with pytest.raises(ConfigurationError):
            ServerClient("token", max_retries=-1)

    def test_config_and_kwargs_conflict(self):
        with pytest.raises(ConfigurationError):
            ServerClient("token", ClientConfig(), timeout=5)

    def test_credential_header(self):
        assert ServerClient("t").credential.header_name == "X-Postmark-Server-Token"
        assert AccountClient("t").credential.header_name == "X-Postmark-Account-Token"

    def test_user_agent(self):
        assert USER_AGENT.startswith("postmark-client-python/")


class TestRequests:
    @pytest.mark.asyncio
    async def test_headers_sent(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/server").mock(
            return_value=httpx.Response(200, json={"ID": 1, "Name": "Main"})
        )
        config = ClientConfig.create(headers={"X-Request-Source": "billing"})

        async with ServerClient("server-token", config) as client:
            await client.get_server()

        headers = route.calls.last.request.headers
        assert headers["X-Postmark-Server-Token"] == "server-token"
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"
        assert headers["User-Agent"] == USER_AGENT
        assert headers["X-Request-Source"] == "billing"

    @pytest.mark.asyncio
    async def test_custom_base_url(self, respx_mock):
        route = respx_mock.get("http://localhost:8080/server").mock(
            return_value=httpx.Response(200, json={"ID": 1})
        )

        async with ServerClient("t", request_host="localhost:8080", use_https=False) as client:
            await client.get_server()

        assert route.called

    @pytest.mark.asyncio
    async def test_caller_http_client_not_closed(self, respx_mock):
        respx_mock.get(f"{BASE_URL}/server").mock(return_value=httpx.Response(200, json={}))

        async with httpx.AsyncClient() as http_client:
            async with ServerClient("t", http_client=http_client) as client:
                await client.get_server()
            assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_missing_identifier(self, server_client):
        with pytest.raises(ConfigurationError):
            await server_client.get_bounce(None)


class TestCallbacks:
    @pytest.mark.asyncio
    async def test_callback_on_success(self, server_client, respx_mock):
        respx_mock.get(f"{BASE_URL}/server").mock(
            return_value=httpx.Response(200, json={"ID": 1, "Name": "Main"})
        )
        calls = []

        result = await server_client.get_server(callback=lambda err, res: calls.append((err, res)))

        assert len(calls) == 1
        assert calls[0][0] is None
        assert calls[0][1] is result
        assert result.name == "Main"

    @pytest.mark.asyncio
    async def test_callback_on_failure(self, server_client, respx_mock):
        respx_mock.get(f"{BASE_URL}/bounces/5").mock(
            return_value=httpx.Response(404, json={"ErrorCode": 701, "Message": "Not found"})
        )
        calls = []

        with pytest.raises(NotFoundError) as exc_info:
            await server_client.get_bounce(5, callback=lambda err, res: calls.append((err, res)))

        assert len(calls) == 1
        assert calls[0][0] is exc_info.value
        assert calls[0][1] is None

    @pytest.mark.asyncio
    async def test_async_callback_awaited(self, server_client, respx_mock):
        respx_mock.get(f"{BASE_URL}/server").mock(return_value=httpx.Response(200, json={"ID": 3}))
        calls = []

        async def callback(err, res):
            calls.append(res.id)

        await server_client.get_server(callback=callback)

        assert calls == [3]

    @pytest.mark.asyncio
    async def test_callback_error_does_not_reinvoke(self, server_client, respx_mock):
        respx_mock.get(f"{BASE_URL}/server").mock(return_value=httpx.Response(200, json={}))
        calls = []

        def callback(err, res):
            calls.append(err)
            raise RuntimeError("callback failed")

        with pytest.raises(RuntimeError):
            await server_client.get_server(callback=callback)

        assert calls == [None]

    @pytest.mark.asyncio
    async def test_undecodable_body_reported_once(self):
        def handler(request):
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not-gzip"),
            )

        calls = []
        client = ServerClient("t", max_retries=2, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(SerializationError) as exc_info:
                await client.get_server(callback=lambda err, res: calls.append((err, res)))

        assert calls == [(exc_info.value, None)]


class TestFilters:
    @pytest.mark.asyncio
    async def test_pagination_defaults_applied(self, server_client, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/bounces").mock(
            return_value=httpx.Response(200, json={"TotalCount": 0, "Bounces": []})
        )

        await server_client.get_bounces()

        params = route.calls.last.request.url.params
        assert params["count"] == "100"
        assert params["offset"] == "0"

    @pytest.mark.asyncio
    async def test_caller_filter_not_mutated(self, server_client, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/bounces").mock(
            return_value=httpx.Response(200, json={"TotalCount": 0, "Bounces": []})
        )
        filter = BounceFilteringParameters(offset=0, inactive=True)

        await server_client.get_bounces(filter)

        assert filter.count is None
        params = route.calls.last.request.url.params
        assert params["count"] == "100"
        assert params["inactive"] == "true"

    @pytest.mark.asyncio
    async def test_dict_filter_not_mutated(self, server_client, respx_mock):
        respx_mock.get(f"{BASE_URL}/bounces").mock(
            return_value=httpx.Response(200, json={"TotalCount": 0, "Bounces": []})
        )
        filter = {"tag": "welcome"}

        await server_client.get_bounces(filter)

        assert filter == {"tag": "welcome"}

    @pytest.mark.asyncio
    async def test_single_message_opens_default_count(self, server_client, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/messages/outbound/opens/abc").mock(
            return_value=httpx.Response(200, json={"TotalCount": 0, "Opens": []})
        )

        await server_client.get_message_opens_for_single_message("abc")
        assert route.calls.last.request.url.params["count"] == "50"

        await server_client.get_message_opens_for_single_message(
            "abc", OutboundMessageOpensFilteringParameters(offset=10))
        params = route.calls.last.request.url.params
        assert params["count"] == "100"
        assert params["offset"] == "10"


class TestRetries:
    @pytest.mark.asyncio
    async def test_terminal_error_single_attempt(self, respx_mock):
        route = respx_mock.post(f"{BASE_URL}/email").mock(
            return_value=httpx.Response(422, json={"ErrorCode": 300, "Message": "Invalid"})
        )
        retry = RetryConfig(max_retries=3, backoff_base=0, backoff_jitter=False)

        async with ServerClient("t", ClientConfig.create(retry=retry)) as client:
            with pytest.raises(ApiInputError):
                await client.send_email({"From": "a@example.com", "To": "b@example.com"})

        assert route.call_count == 1

    @pytest.mark.asyncio
    async def test_unsupported_protocol_not_retried(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.UnsupportedProtocol("Request URL is missing a scheme", request=request)

        retry = RetryConfig(max_retries=3, backoff_base=0, backoff_jitter=False)
        client = ServerClient("t", ClientConfig.create(retry=retry),
                              transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(ConfigurationError):
                await client.get_server()

        assert len(attempts) == 1
