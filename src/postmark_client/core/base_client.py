"""
Общая основа façade клиентов.

BaseClient владеет httpx.AsyncClient, конфигурацией и учётными данными и
реализует единую точку диспетчеризации: маршрут + идентификатор + payload
или фильтр превращаются в RequestDescriptor, который выполняется через
RetryController. Результат отдаётся и как возвращаемое значение, и в
необязательный callback.
"""

import inspect
from importlib.metadata import version, PackageNotFoundError
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import httpx

from .config import ClientConfig, TimeoutConfig
from .exceptions import ConfigurationError, PostmarkError
from .executor import RequestExecutor
from .logging import PostmarkLogger
from .pagination import apply_default_pagination
from .request import Credential, RequestDescriptor, Route
from .retry_engine import RetryController


try:
    CLIENT_VERSION = version("postmark-client")
except PackageNotFoundError:
    CLIENT_VERSION = "0.0.0-dev"

USER_AGENT = f"postmark-client-python/{CLIENT_VERSION}"

Callback = Callable[[Optional[PostmarkError], Any], Union[None, Awaitable[None]]]


def _to_payload(payload: Any) -> Any:
    """Model, list of models, mapping or None -> JSON-ready value."""
    if payload is None:
        return {}
    if hasattr(payload, "to_wire"):
        return payload.to_wire()
    if isinstance(payload, (list, tuple)):
        return [_to_payload(item) for item in payload]
    if isinstance(payload, Mapping):
        return dict(payload)
    return payload


def _copy_filter(filter: Any) -> Any:
    if hasattr(filter, "model_copy"):
        return filter.model_copy()
    if isinstance(filter, Mapping):
        return dict(filter)
    return filter


def _to_query(filter: Any) -> dict:
    if filter is None:
        return {}
    if hasattr(filter, "to_query"):
        return filter.to_query()
    return {key: value for key, value in dict(filter).items() if value is not None}


class BaseClient:
    """
    Базовый async клиент Postmark API.

    Args:
        token: API токен (server или account, в зависимости от класса)
        config: ClientConfig; если не указан, собирается из **kwargs
        http_client: Готовый httpx.AsyncClient (не закрывается библиотекой)
        transport: httpx транспорт для лениво создаваемого клиента
        **kwargs: Аргументы ClientConfig.create (timeout, max_retries, ...)

    Raises:
        ConfigurationError: Пустой токен или некорректная конфигурация
    """

    TOKEN_HEADER = ""
    TOKEN_SETTING = ""

    def __init__(
        self,
        token: str,
        config: Optional[ClientConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ):
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError(
                f"A valid API token must be provided when creating a {type(self).__name__}."
            )

        if config is None:
            try:
                config = ClientConfig.create(**kwargs)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        elif kwargs:
            raise ConfigurationError(
                f"Unexpected arguments together with config: {', '.join(sorted(kwargs))}"
            )

        self._config = config
        self._credential = Credential(token=token, header_name=self.TOKEN_HEADER)

        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None
        self._transport = transport

        self._logger: Optional[PostmarkLogger] = None
        if config.logging is not None:
            self._logger = PostmarkLogger(config.logging)

        headers = {"User-Agent": USER_AGENT}
        headers.update(config.headers)

        self._executor = RequestExecutor(config.base_url, self._get_client, headers=headers)
        self._controller = RetryController(self._executor, config.retry, logger=self._logger)

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env", **overrides):
        """
        Создать клиент из переменных окружения POSTMARK_*.

        Example:
            >>> client = ServerClient.from_env()
            >>> client = AccountClient.from_env(max_retries=0)

        Raises:
            ConfigurationError: Токен не задан, неизвестный или невалидный override
        """
        from .env_config import build_config, load_settings

        try:
            config, settings = build_config(load_settings(env_file, **overrides))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        secret = getattr(settings, cls.TOKEN_SETTING, None)
        if secret is None:
            raise ConfigurationError(
                f"POSTMARK_{cls.TOKEN_SETTING.upper()} is not set"
            )
        return cls(secret.get_secret_value(), config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def credential(self) -> Credential:
        return self._credential

    def _build_timeout(self, timeout: TimeoutConfig) -> httpx.Timeout:
        connect = timeout.connect if timeout.connect is not None else timeout.total
        return httpx.Timeout(timeout.total, connect=connect)

    async def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx клиент."""
        if self._client is None:
            client_kwargs = {"timeout": self._build_timeout(self._config.timeout)}
            if self._transport is not None:
                client_kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**client_kwargs)
            self._owns_client = True
        return self._client

    async def __aenter__(self):
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Закрыть клиент и освободить ресурсы."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
        if self._logger is not None:
            self._logger.close()

    async def _dispatch(
        self,
        route: Route,
        identifier: Any = None,
        payload: Any = None,
        filter: Any = None,
        callback: Optional[Callback] = None,
    ) -> Any:
        """
        Выполнить операцию façade.

        Фильтр вызывающего не изменяется: берётся копия (или новый
        экземпляр по умолчанию), и дефолты пагинации применяются к ней.
        Callback вызывается ровно один раз: (None, result) при успехе,
        (error, None) при ошибке. Ошибка всё равно пробрасывается.

        Args:
            route: Запись таблицы маршрутов
            identifier: Значение для {id} в пути
            payload: Тело запроса (POST/PUT/PATCH)
            filter: Фильтр запроса (GET)
            callback: Необязательный callback(error, result), sync или async

        Returns:
            Провалидированный результат
        """
        error: Optional[PostmarkError] = None
        result: Any = None

        try:
            if route.method.has_body:
                request_payload = _to_payload(payload)
            else:
                query = _copy_filter(filter) if filter is not None else route.new_filter()
                if route.paginated:
                    query = apply_default_pagination(query if query is not None else {})
                request_payload = _to_query(query)

            descriptor = RequestDescriptor(
                method=route.method,
                path=route.build_path(identifier),
                credential=self._credential,
                payload=request_payload,
            )
        except ValueError as e:
            error = ConfigurationError(str(e))
        else:
            try:
                result = await self._controller.execute(descriptor, route.response_type)
            except PostmarkError as e:
                error = e

        if callback is not None:
            outcome = callback(error, None if error is not None else result)
            if inspect.isawaitable(outcome):
                await outcome

        if error is not None:
            raise error
        return result
