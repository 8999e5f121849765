"""
Иерархия исключений Postmark клиента.

Классификация:
- TemporaryError (retryable=True) - сеть, 429, 5xx
- FatalError (fatal=True) - 4xx, невалидный ответ, ошибки конфигурации

Каждое исключение несёт error_code (ErrorCode из тела ответа API),
message и status_code (HTTP статус; 0 если ответа не было).
"""

import json
import re
from typing import Any, List, Mapping, Optional

import httpx

# Код ошибки для случаев, когда HTTP ответ не получен
NETWORK_ERROR_CODE = -1

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PostmarkError(Exception):
    """Базовое исключение Postmark клиента."""

    retryable: bool = False
    fatal: bool = False

    def __init__(self, message: str, error_code: int = 0, status_code: int = 0):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"error_code={self.error_code}, status_code={self.status_code})"
        )

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ВРЕМЕННЫЕ ОШИБКИ (retryable=True)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TemporaryError(PostmarkError):
    """
    Временная ошибка - можно ретраить.

    Примеры: таймауты, сетевые ошибки, 429, 5xx.
    """
    retryable = True


class NetworkError(TemporaryError):
    """
    Ответ не получен (DNS, connection refused, таймаут).

    error_code всегда NETWORK_ERROR_CODE, status_code всегда 0.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message, error_code=NETWORK_ERROR_CODE, status_code=0)


class TimeoutError(NetworkError):
    """Таймаут запроса."""
    pass


class ConnectionError(NetworkError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - DNS resolution failed
    """
    pass


class RateLimitExceededError(TemporaryError):
    """
    429 Rate Limit.

    Args:
        message: Сообщение API
        error_code: ErrorCode из тела ответа
        retry_after: Значение заголовка Retry-After (если есть)
    """

    def __init__(self, message: str, error_code: int = 0, retry_after: Optional[str] = None):
        self.retry_after = retry_after
        super().__init__(message, error_code=error_code, status_code=429)


class ServerError(TemporaryError):
    """5xx ошибка сервера."""
    pass


class InternalServerError(ServerError):
    """500 Internal Server Error."""
    pass


class ServiceUnavailableError(ServerError):
    """503 Service Unavailable."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ФАТАЛЬНЫЕ ОШИБКИ (fatal=True)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FatalError(PostmarkError):
    """
    Фатальная ошибка - НЕ ретраить.

    Примеры: 4xx ошибки клиента, невалидный ответ.
    """
    fatal = True


class ClientError(FatalError):
    """4xx ошибка (кроме 429). ErrorCode и Message из API без изменений."""
    pass


class InvalidAPIKeyError(ClientError):
    """401 - токен отсутствует или неверный."""
    pass


class NotFoundError(ClientError):
    """404 - ресурс не найден."""
    pass


class ApiInputError(ClientError):
    """422 - запрос не прошёл валидацию API."""
    pass


class InvalidEmailRequestError(ApiInputError):
    """422 с ErrorCode 300 - невалидный email запрос."""
    ERROR_CODE = 300


class InactiveRecipientsError(ApiInputError):
    """
    422 с ErrorCode 406 - получатели помечены как неактивные.

    Attributes:
        recipients: Адреса, перечисленные API в сообщении об ошибке
    """
    ERROR_CODE = 406

    _RECIPIENTS_PATTERNS = (
        re.compile(r"Found inactive addresses: (.+?)\.\s", re.DOTALL),
        re.compile(r"these inactive addresses: (.+?)\.\s", re.DOTALL),
        re.compile(r"inactive addresses: (.+?)\.?$", re.DOTALL),
    )

    def __init__(self, message: str, error_code: int = ERROR_CODE, status_code: int = 422):
        super().__init__(message, error_code=error_code, status_code=status_code)
        self.recipients: List[str] = self.parse_recipients(message)

    @classmethod
    def parse_recipients(cls, message: str) -> List[str]:
        """Достать список неактивных адресов из текста ошибки."""
        for pattern in cls._RECIPIENTS_PATTERNS:
            match = pattern.search(message)
            if match:
                return [address.strip() for address in match.group(1).split(",") if address.strip()]
        return []


class UnexpectedStatusError(FatalError):
    """Не-2xx статус, не попадающий ни в 4xx, ни в 5xx."""
    pass


class SerializationError(FatalError):
    """
    Невалидный ответ.

    Примеры:
    - Битый JSON в успешном ответе
    - JSON не соответствует ожидаемой модели
    """
    pass


class ConfigurationError(PostmarkError):
    """Ошибка конфигурации клиента (например, пустой токен)."""
    fatal = True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _parse_error_body(body: bytes) -> Optional[Mapping[str, Any]]:
    """Распарсить тело ошибки {ErrorCode, Message}; None если это не JSON объект."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def classify_response(
    status_code: int,
    body: bytes,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
) -> PostmarkError:
    """
    Конвертировать не-2xx ответ API в наше исключение.

    Тело ожидается в виде {"ErrorCode": int, "Message": str}. Если тело
    не JSON, классификация идёт только по статусу: error_code=0, а message
    содержит начало сырого текста ответа.

    Args:
        status_code: HTTP статус
        body: Сырое тело ответа
        url: URL запроса
        headers: Заголовки ответа (нужен Retry-After для 429)

    Returns:
        Исключение с правильной классификацией

    Examples:
        >>> error = classify_response(404, b'{"ErrorCode": 1104, "Message": "Domain not found"}', url)
        >>> assert isinstance(error, NotFoundError)
        >>> assert error.error_code == 1104
    """
    data = _parse_error_body(body)
    if data is not None:
        try:
            error_code = int(data.get("ErrorCode", 0) or 0)
        except (TypeError, ValueError):
            error_code = 0
        message = str(data.get("Message", "") or f"HTTP {status_code} error for {url}")
    else:
        error_code = 0
        text = body.decode("utf-8", errors="replace")[:200] if body else ""
        message = text or f"HTTP {status_code} error for {url}"

    if status_code == 429:
        retry_after = headers.get("Retry-After") if headers else None
        return RateLimitExceededError(message, error_code=error_code, retry_after=retry_after)

    if 400 <= status_code < 500:
        if status_code == 401:
            return InvalidAPIKeyError(message, error_code, status_code)
        if status_code == 404:
            return NotFoundError(message, error_code, status_code)
        if status_code == 422:
            if error_code == InvalidEmailRequestError.ERROR_CODE:
                return InvalidEmailRequestError(message, error_code, status_code)
            if error_code == InactiveRecipientsError.ERROR_CODE:
                return InactiveRecipientsError(message, error_code, status_code)
            return ApiInputError(message, error_code, status_code)
        return ClientError(message, error_code, status_code)

    if 500 <= status_code < 600:
        if status_code == 500:
            return InternalServerError(message, error_code, status_code)
        if status_code == 503:
            return ServiceUnavailableError(message, error_code, status_code)
        return ServerError(message, error_code, status_code)

    return UnexpectedStatusError(message, error_code, status_code)


def classify_transport_error(exc: Exception, url: str) -> PostmarkError:
    """
    Конвертировать исключение httpx (запрос без валидного ответа) в наше.

    - UnsupportedProtocol (base_url без схемы) -> ConfigurationError
    - DecodingError (битое сжатие/кодировка тела) -> SerializationError
    - TooManyRedirects -> UnexpectedStatusError
    - таймауты и прочие TransportError -> NetworkError

    Examples:
        >>> error = classify_transport_error(httpx.ReadTimeout("timed out"), url)
        >>> assert isinstance(error, TimeoutError)
        >>> assert error.status_code == 0
    """
    message = str(exc) or exc.__class__.__name__

    if isinstance(exc, httpx.UnsupportedProtocol):
        return ConfigurationError(f"Invalid request URL {url}: {message}")

    if isinstance(exc, httpx.DecodingError):
        return SerializationError(f"Response body could not be decoded: {message}")

    if isinstance(exc, httpx.TooManyRedirects):
        return UnexpectedStatusError(f"Too many redirects for {url}: {message}")

    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError(message, url)

    if isinstance(exc, httpx.TransportError):
        return ConnectionError(message, url)

    return NetworkError(message, url)
