"""Тесты иерархии исключений и классификации ответов."""

import json

import httpx
import pytest

from postmark_client.core.exceptions import (
    NETWORK_ERROR_CODE,
    ApiInputError,
    ClientError,
    ConfigurationError,
    ConnectionError,
    FatalError,
    InactiveRecipientsError,
    InternalServerError,
    InvalidAPIKeyError,
    InvalidEmailRequestError,
    NetworkError,
    NotFoundError,
    PostmarkError,
    RateLimitExceededError,
    SerializationError,
    ServerError,
    ServiceUnavailableError,
    TemporaryError,
    TimeoutError,
    UnexpectedStatusError,
    classify_response,
    classify_transport_error,
)

URL = "https://api.postmarkapp.com/email"


def _body(error_code, message):
    return json.dumps({"ErrorCode": error_code, "Message": message}).encode()


class TestHierarchy:
    def test_temporary_errors_are_retryable(self):
        for cls in (NetworkError, TimeoutError, ConnectionError, ServerError,
                    InternalServerError, ServiceUnavailableError):
            assert issubclass(cls, TemporaryError)
            assert cls.retryable is True
        assert RateLimitExceededError.retryable is True

    def test_fatal_errors(self):
        for cls in (ClientError, InvalidAPIKeyError, NotFoundError, ApiInputError,
                    InvalidEmailRequestError, InactiveRecipientsError,
                    UnexpectedStatusError, SerializationError):
            assert issubclass(cls, FatalError)
            assert cls.fatal is True
            assert cls.retryable is False

    def test_configuration_error_is_fatal_postmark_error(self):
        assert issubclass(ConfigurationError, PostmarkError)
        assert ConfigurationError.fatal is True

    def test_network_error_code(self):
        error = NetworkError("boom", URL)
        assert error.error_code == NETWORK_ERROR_CODE == -1
        assert error.status_code == 0
        assert error.url == URL

    def test_repr_contains_codes(self):
        error = ClientError("Bad", 10, 400)
        assert "error_code=10" in repr(error)
        assert "status_code=400" in repr(error)


class TestClassifyResponse:
    def test_not_found_keeps_api_code_and_message(self):
        error = classify_response(404, _body(1104, "Domain not found"), URL)
        assert isinstance(error, NotFoundError)
        assert error.error_code == 1104
        assert error.message == "Domain not found"
        assert error.status_code == 404

    def test_unauthorized(self):
        error = classify_response(401, _body(10, "Bad or missing API token"), URL)
        assert isinstance(error, InvalidAPIKeyError)
        assert error.error_code == 10

    def test_422_generic(self):
        error = classify_response(422, _body(405, "Not allowed"), URL)
        assert type(error) is ApiInputError

    def test_422_invalid_email_request(self):
        error = classify_response(422, _body(300, "Invalid email request"), URL)
        assert isinstance(error, InvalidEmailRequestError)

    def test_422_inactive_recipients_parsed(self):
        message = (
            "You tried to send to recipient(s) that have been marked as inactive. "
            "Found inactive addresses: a@example.com, b@example.com. "
            "Inactive recipients are ones that have generated a hard bounce or a spam complaint."
        )
        error = classify_response(422, _body(406, message), URL)
        assert isinstance(error, InactiveRecipientsError)
        assert error.recipients == ["a@example.com", "b@example.com"]

    def test_other_4xx_is_client_error(self):
        error = classify_response(409, _body(0, "Conflict"), URL)
        assert type(error) is ClientError
        assert error.status_code == 409

    def test_rate_limit_with_retry_after(self):
        error = classify_response(429, _body(0, "Slow down"), URL, headers={"Retry-After": "2"})
        assert isinstance(error, RateLimitExceededError)
        assert error.retry_after == "2"
        assert error.status_code == 429

    @pytest.mark.parametrize("status,cls", [
        (500, InternalServerError),
        (503, ServiceUnavailableError),
        (502, ServerError),
    ])
    def test_server_errors(self, status, cls):
        error = classify_response(status, _body(0, "oops"), URL)
        assert type(error) is cls
        assert error.status_code == status

    def test_unexpected_status(self):
        error = classify_response(302, b"", URL)
        assert isinstance(error, UnexpectedStatusError)

    def test_non_json_body_uses_status_and_text(self):
        error = classify_response(502, b"<html>Bad Gateway</html>", URL)
        assert isinstance(error, ServerError)
        assert error.error_code == 0
        assert "Bad Gateway" in error.message

    def test_empty_body_has_fallback_message(self):
        error = classify_response(500, b"", URL)
        assert "500" in error.message


class TestClassifyTransportError:
    def test_timeout(self):
        error = classify_transport_error(httpx.ReadTimeout("timed out"), URL)
        assert isinstance(error, TimeoutError)
        assert error.status_code == 0

    def test_connect_error(self):
        error = classify_transport_error(httpx.ConnectError("refused"), URL)
        assert isinstance(error, ConnectionError)
        assert error.error_code == NETWORK_ERROR_CODE

    def test_other_exception(self):
        error = classify_transport_error(RuntimeError("x"), URL)
        assert type(error) is NetworkError

    def test_unsupported_protocol_is_configuration_error(self):
        error = classify_transport_error(httpx.UnsupportedProtocol("missing scheme"), URL)
        assert isinstance(error, ConfigurationError)
        assert not error.retryable

    def test_decoding_error_is_serialization_error(self):
        error = classify_transport_error(httpx.DecodingError("bad gzip"), URL)
        assert isinstance(error, SerializationError)
        assert error.fatal

    def test_too_many_redirects_is_terminal(self):
        error = classify_transport_error(httpx.TooManyRedirects("loop"), URL)
        assert isinstance(error, UnexpectedStatusError)
        assert not error.retryable
