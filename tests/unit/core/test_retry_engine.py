"""Тесты RetryEngine."""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from postmark_client.core.config import RetryConfig
from postmark_client.core.exceptions import (
    ApiInputError,
    ClientError,
    ConnectionError,
    InternalServerError,
    RateLimitExceededError,
    ServiceUnavailableError,
    TimeoutError,
)
from postmark_client.core.retry_engine import RetryEngine


def test_retry_engine_init():
    """Тест инициализации."""
    engine = RetryEngine(RetryConfig())
    assert engine.attempt == 0


def test_should_retry_timeout_error():
    """Retry для TimeoutError."""
    engine = RetryEngine(RetryConfig())
    assert engine.should_retry(TimeoutError("Timeout", "https://example.com")) is True


def test_should_retry_server_error():
    """Retry для 5xx."""
    engine = RetryEngine(RetryConfig())
    assert engine.should_retry(InternalServerError("oops", 0, 500)) is True


def test_should_retry_post_too():
    """Решение не зависит от метода: POST (/email) тоже ретраится."""
    engine = RetryEngine(RetryConfig())
    assert engine.should_retry(ConnectionError("reset", "https://example.com")) is True


def test_should_not_retry_fatal():
    """НЕ retry для 4xx."""
    engine = RetryEngine(RetryConfig())
    assert engine.should_retry(ApiInputError("invalid", 300, 422)) is False


def test_should_not_retry_network_when_disabled():
    engine = RetryEngine(RetryConfig(retry_on_network_errors=False))
    assert engine.should_retry(TimeoutError("Timeout")) is False


def test_custom_status_set():
    """Набор статусов берётся только из конфигурации."""
    engine = RetryEngine(RetryConfig(retryable_status_codes={409}))
    assert engine.should_retry(ClientError("conflict", 0, 409)) is True
    assert engine.should_retry(ServiceUnavailableError("down", 0, 503)) is False


def test_should_not_retry_max_attempts():
    """НЕ retry после исчерпания попыток."""
    engine = RetryEngine(RetryConfig(max_retries=2))
    error = InternalServerError("oops", 0, 500)

    assert engine.should_retry(error) is True
    engine.increment()
    assert engine.should_retry(error) is True
    engine.increment()
    assert engine.should_retry(error) is False


def test_zero_retries_never_retries():
    engine = RetryEngine(RetryConfig(max_retries=0))
    assert engine.should_retry(InternalServerError("oops", 0, 500)) is False


def test_exponential_backoff_without_jitter():
    engine = RetryEngine(RetryConfig(backoff_base=0.5, backoff_factor=2, backoff_jitter=False))
    assert engine.get_wait_time() == 0.5
    engine.increment()
    assert engine.get_wait_time() == 1.0
    engine.increment()
    assert engine.get_wait_time() == 2.0


def test_backoff_capped():
    engine = RetryEngine(RetryConfig(backoff_base=10, backoff_max=15, backoff_jitter=False))
    engine.increment()
    assert engine.get_wait_time() == 15


def test_fixed_backoff():
    engine = RetryEngine(RetryConfig(backoff="fixed", backoff_base=1.5, backoff_jitter=False))
    engine.increment()
    engine.increment()
    assert engine.get_wait_time() == 1.5


def test_jitter_range():
    engine = RetryEngine(RetryConfig(backoff_base=1.0, backoff_jitter=True))
    for _ in range(50):
        assert 0.5 <= engine.get_wait_time() <= 1.5


def test_retry_after_seconds():
    engine = RetryEngine(RetryConfig(backoff_jitter=False))
    error = RateLimitExceededError("slow down", retry_after="7")
    assert engine.get_wait_time(error) == 7.0


def test_retry_after_capped():
    engine = RetryEngine(RetryConfig(retry_after_max=10))
    error = RateLimitExceededError("slow down", retry_after="3600")
    assert engine.get_wait_time(error) == 10


def test_retry_after_ignored_when_disabled():
    engine = RetryEngine(RetryConfig(respect_retry_after=False, backoff_base=0.5,
                                     backoff_jitter=False))
    error = RateLimitExceededError("slow down", retry_after="7")
    assert engine.get_wait_time(error) == 0.5


def test_retry_after_http_date():
    engine = RetryEngine(RetryConfig())
    future = datetime.now(timezone.utc) + timedelta(seconds=30)
    seconds = engine._parse_retry_after(format_datetime(future, usegmt=True))
    assert 0 < seconds <= 30


@pytest.mark.parametrize("value", ["", None, "-5", "garbage", "9" * 200])
def test_retry_after_invalid(value):
    engine = RetryEngine(RetryConfig())
    assert engine._parse_retry_after(value) is None

