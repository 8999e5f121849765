"""
Single-shot request execution over httpx.

The executor performs exactly one HTTP round trip for a
``RequestDescriptor``: it attaches the JSON and authentication headers,
serializes the payload, and turns the response into a validated result or
a classified ``PostmarkError``. Retries and logging live one layer up in
``RetryController``.
"""

import json
from functools import lru_cache
from typing import Any, Callable, Awaitable, Dict, Mapping

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    SerializationError,
    classify_response,
    classify_transport_error,
)
from .request import RequestDescriptor

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@lru_cache(maxsize=None)
def _adapter_for(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def parse_response_body(body: bytes, response_type: Any, status_code: int = 200) -> Any:
    """
    Decode a 2xx JSON body and validate it into ``response_type``.

    An empty body validates as ``{}`` (endpoints that return nothing).

    Raises:
        SerializationError: body is not JSON or does not fit the model
    """
    if body and body.strip():
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise SerializationError(
                f"Response body is not valid JSON: {e}", status_code=status_code
            ) from e
    else:
        data = {}

    if response_type is None:
        return data

    try:
        return _adapter_for(response_type).validate_python(data)
    except ValidationError as e:
        raise SerializationError(
            f"Response does not match {getattr(response_type, '__name__', response_type)}: "
            f"{e.error_count()} validation error(s)",
            status_code=status_code,
        ) from e


class RequestExecutor:
    """
    Executes one request, no retries.

    Args:
        base_url: Base URL requests are resolved against
        get_client: Coroutine returning the shared ``httpx.AsyncClient``
        headers: Extra default headers (User-Agent, configured headers)

    Example:
        >>> executor = RequestExecutor("https://api.postmarkapp.com", get_client)
        >>> server = await executor.execute(descriptor, Server)
    """

    def __init__(
        self,
        base_url: str,
        get_client: Callable[[], Awaitable[httpx.AsyncClient]],
        headers: Mapping[str, str] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._get_client = get_client
        self._headers = dict(headers or {})

    def build_url(self, path: str) -> str:
        """base_url + path; path always starts with '/'."""
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def build_headers(self, descriptor: RequestDescriptor) -> Dict[str, str]:
        """Configured headers, then Accept/Content-Type, then the auth header."""
        headers = dict(self._headers)
        headers.update(DEFAULT_HEADERS)
        name, token = descriptor.credential.as_header()
        headers[name] = token
        return headers

    async def execute(self, descriptor: RequestDescriptor, response_type: Any = None) -> Any:
        """
        Выполнить один HTTP запрос.

        Args:
            descriptor: Описание запроса
            response_type: Модель (или List[Model]) для результата

        Returns:
            Провалидированный результат

        Raises:
            NetworkError: Ответ не получен (status_code=0)
            ConfigurationError: URL без поддерживаемой схемы
            ClientError / ServerError / RateLimitExceededError: не-2xx ответ
            SerializationError: Тело успешного ответа не разобрано
        """
        url = self.build_url(descriptor.path)
        request_kwargs: Dict[str, Any] = {"headers": self.build_headers(descriptor)}

        if descriptor.method.has_body:
            request_kwargs["content"] = json.dumps(descriptor.json_body()).encode("utf-8")
        else:
            params = descriptor.query_params()
            if params:
                request_kwargs["params"] = params

        client = await self._get_client()

        try:
            response = await client.request(descriptor.method.value, url, **request_kwargs)
        except httpx.RequestError as e:
            raise classify_transport_error(e, url) from e

        if 200 <= response.status_code < 300:
            return parse_response_body(response.content, response_type, response.status_code)

        raise classify_response(
            response.status_code,
            response.content,
            url,
            headers=response.headers,
        )
