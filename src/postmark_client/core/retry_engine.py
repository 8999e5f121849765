"""
Retry engine для повторных попыток запросов к Postmark API.

Включает:
- Классификацию retryable / terminal по RetryConfig
- Exponential или fixed backoff с jitter
- Retry-After header parsing (429)
- RetryController - цикл попыток вокруг RequestExecutor
"""

import asyncio
import logging
import random
import time
import uuid
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional, TYPE_CHECKING

from .config import BackoffStrategy, RetryConfig
from .exceptions import NetworkError, PostmarkError, RateLimitExceededError
from .request import RequestDescriptor

if TYPE_CHECKING:
    from .executor import RequestExecutor
    from .logging import PostmarkLogger

logger = logging.getLogger(__name__)

# Нормальные значения: "60" или "Wed, 21 Oct 2015 07:28:00 GMT"
MAX_RETRY_AFTER_HEADER_LENGTH = 100


class RetryEngine:
    """
    Состояние и решения retry для одного вызова.

    Не разделяется между конкурентными вызовами: RetryController создаёт
    новый экземпляр на каждый запрос.

    Examples:
        >>> engine = RetryEngine(RetryConfig(max_retries=3))
        >>> if engine.should_retry(error):
        >>>     await asyncio.sleep(engine.get_wait_time(error))
        >>>     engine.increment()
    """

    def __init__(self, config: RetryConfig):
        """
        Args:
            config: Конфигурация retry
        """
        self.config = config
        self._attempt = 0

    def is_retryable(self, error: Exception) -> bool:
        """
        Классифицировать ошибку без учёта лимита попыток.

        Retryable: NetworkError (если retry_on_network_errors) или
        status_code из retryable_status_codes. Всё остальное terminal.
        """
        if isinstance(error, NetworkError):
            return self.config.retry_on_network_errors

        status_code = getattr(error, 'status_code', None)
        if status_code and status_code in self.config.retryable_status_codes:
            return True

        return False

    def should_retry(self, error: Exception) -> bool:
        """
        Решить нужен ли retry.

        Args:
            error: Исключение последней попытки

        Returns:
            True если ошибка retryable и лимит попыток не исчерпан
        """
        # Проверяем, не превысит ли следующая попытка лимит
        if self._attempt + 1 >= self.config.max_attempts:
            return False

        return self.is_retryable(error)

    def get_wait_time(self, error: Optional[Exception] = None) -> float:
        """
        Вычислить время ожидания перед следующей попыткой.

        Args:
            error: Исключение (нужно для Retry-After у 429)

        Returns:
            Секунды для ожидания
        """
        # Приоритет 1: Retry-After header
        if self.config.respect_retry_after and isinstance(error, RateLimitExceededError):
            retry_after = self._parse_retry_after(error.retry_after)
            if retry_after is not None:
                return min(retry_after, self.config.retry_after_max)

        # Приоритет 2: расписание backoff
        if self.config.backoff == BackoffStrategy.FIXED:
            wait = self.config.backoff_base
        else:
            wait = self.config.backoff_base * (
                self.config.backoff_factor ** self._attempt
            )

        wait = min(wait, self.config.backoff_max)

        # Jitter (50-150% от wait)
        if self.config.backoff_jitter:
            wait = wait * (0.5 + random.random())

        return wait

    def _parse_retry_after(self, retry_after: Optional[str]) -> Optional[float]:
        """
        Распарсить Retry-After с валидацией против мусорных значений.

        Returns:
            Секунды или None
        """
        if not retry_after:
            return None

        retry_after = str(retry_after)
        if len(retry_after) > MAX_RETRY_AFTER_HEADER_LENGTH:
            logger.warning(
                f"Retry-After header too long ({len(retry_after)} chars), ignoring"
            )
            return None

        try:
            seconds = float(retry_after)
            if seconds < 0:
                logger.warning(f"Retry-After seconds value is negative: {seconds}")
                return None
            return seconds
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(retry_after)
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Failed to parse Retry-After header '{retry_after}': {e}")
            return None

        if retry_date.tzinfo is None:
            retry_date = retry_date.replace(tzinfo=timezone.utc)
        delta = (retry_date - datetime.now(timezone.utc)).total_seconds()
        return max(0.0, delta)

    def increment(self):
        """Увеличить счётчик попыток."""
        self._attempt += 1

    @property
    def attempt(self) -> int:
        """Номер текущей попытки (с нуля)."""
        return self._attempt


class RetryController:
    """
    Цикл попыток вокруг RequestExecutor.

    Единственное место, где принимается решение retryable / terminal.
    Один и тот же RequestDescriptor отправляется повторно без изменений;
    общее количество попыток не превышает max_retries + 1. При исчерпании
    попыток пробрасывается последняя ошибка как есть.

    Example:
        >>> controller = RetryController(executor, RetryConfig(max_retries=2))
        >>> result = await controller.execute(descriptor, MessageSendingResponse)
    """

    def __init__(
        self,
        executor: 'RequestExecutor',
        config: RetryConfig,
        logger: Optional['PostmarkLogger'] = None,
    ):
        self._executor = executor
        self._config = config
        self._logger = logger

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def execute(self, descriptor: RequestDescriptor, response_type: Any = None) -> Any:
        """
        Выполнить запрос с retry логикой.

        Args:
            descriptor: Описание запроса (не меняется между попытками)
            response_type: Модель результата

        Returns:
            Результат успешной попытки

        Raises:
            PostmarkError: terminal ошибка или последняя retryable ошибка
        """
        retry_engine = RetryEngine(self._config)
        correlation_id = str(uuid.uuid4())
        start_time = time.monotonic()

        if self._logger:
            from .logging.filters import set_correlation_id
            set_correlation_id(correlation_id)
            self._logger.debug(
                "Request started",
                method=descriptor.method.value,
                path=descriptor.path,
                max_retries=self._config.max_retries,
            )

        try:
            while True:
                try:
                    result = await self._executor.execute(descriptor, response_type)
                except PostmarkError as error:
                    if not retry_engine.should_retry(error):
                        if self._logger:
                            self._logger.error(
                                "Request failed",
                                method=descriptor.method.value,
                                path=descriptor.path,
                                error=error.message,
                                error_type=type(error).__name__,
                                error_code=error.error_code,
                                status_code=error.status_code,
                                attempt=retry_engine.attempt + 1,
                                max_attempts=self._config.max_attempts,
                                duration_ms=round((time.monotonic() - start_time) * 1000, 2),
                            )
                        raise

                    wait_time = retry_engine.get_wait_time(error)

                    if self._logger:
                        self._logger.warning(
                            "Request error (will retry)",
                            method=descriptor.method.value,
                            path=descriptor.path,
                            error=error.message,
                            error_type=type(error).__name__,
                            status_code=error.status_code,
                            attempt=retry_engine.attempt + 1,
                            max_attempts=self._config.max_attempts,
                            wait_time_s=round(wait_time, 2),
                        )

                    await asyncio.sleep(wait_time)
                    retry_engine.increment()
                    continue

                if self._logger:
                    self._logger.info(
                        "Request completed",
                        method=descriptor.method.value,
                        path=descriptor.path,
                        attempt=retry_engine.attempt + 1,
                        duration_ms=round((time.monotonic() - start_time) * 1000, 2),
                    )
                return result
        finally:
            if self._logger:
                from .logging.filters import clear_correlation_id
                clear_correlation_id()
