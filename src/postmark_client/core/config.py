"""
Система конфигурации Postmark клиента.

Все конфиги immutable (frozen dataclasses): один и тот же конфиг безопасно
разделяется между конкурентными вызовами одного клиента.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, FrozenSet, Union, TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from .logging import LoggingConfig

DEFAULT_REQUEST_HOST = "api.postmarkapp.com"
DEFAULT_TIMEOUT = 180.0

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        total: Общий таймаут запроса (сек), применяется к read/write/pool
        connect: Таймаут подключения (сек); по умолчанию равен total

    Examples:
        >>> TimeoutConfig(total=30)
        >>> TimeoutConfig(total=60, connect=5)
    """
    total: float = DEFAULT_TIMEOUT
    connect: Optional[float] = None

    def __post_init__(self):
        """Валидация."""
        if self.total <= 0:
            raise ValueError("timeout must be positive")
        if self.connect is not None and self.connect <= 0:
            raise ValueError("connect timeout must be positive")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RETRY CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class BackoffStrategy(str, Enum):
    """Форма расписания задержек между попытками."""
    EXPONENTIAL = "exponential"
    FIXED = "fixed"


@dataclass(frozen=True)
class RetryConfig:
    """
    Конфигурация retry стратегии.

    Повторная отправка выполняется для любого HTTP метода, включая POST
    (отправка писем). Если сервер принял запрос, а ответ потерялся в сети,
    письмо будет отправлено повторно. Для строгой доставки "не более одного
    раза" используйте max_retries=0.

    Args:
        max_retries: Количество повторов (не включая первую попытку)
        backoff: Форма задержки: exponential или fixed
        backoff_base: Базовая задержка (сек)
        backoff_factor: Множитель для exponential backoff
        backoff_max: Максимальная задержка (сек)
        backoff_jitter: Добавлять случайность (против thundering herd)
        retryable_status_codes: Какие статус коды ретраить
        retry_on_network_errors: Ретраить ли сетевые ошибки (нет ответа)
        respect_retry_after: Учитывать Retry-After header
        retry_after_max: Максимум ждать из Retry-After (сек)

    Examples:
        >>> RetryConfig(max_retries=3, backoff_base=0.5)
        >>> RetryConfig(max_retries=2, backoff="fixed", backoff_base=1.0)
    """
    max_retries: int = 3
    backoff: BackoffStrategy = BackoffStrategy.EXPONENTIAL
    backoff_base: float = 0.5
    backoff_factor: float = 2.0
    backoff_max: float = 30.0
    backoff_jitter: bool = True

    retryable_status_codes: FrozenSet[int] = field(
        default_factory=lambda: frozenset({429, 500, 502, 503, 504})
    )
    retry_on_network_errors: bool = True

    respect_retry_after: bool = True
    retry_after_max: float = 60.0

    def __post_init__(self):
        """Валидация и нормализация."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.backoff_base < 0:
            raise ValueError("backoff_base must be non-negative")
        if self.backoff_factor < 1:
            raise ValueError("backoff_factor must be >= 1")
        if self.backoff_max < 0:
            raise ValueError("backoff_max must be non-negative")
        if self.retry_after_max < 0:
            raise ValueError("retry_after_max must be non-negative")

        # Строки ("fixed") приводим к enum, set -> frozenset
        object.__setattr__(self, 'backoff', BackoffStrategy(self.backoff))
        object.__setattr__(self, 'retryable_status_codes', frozenset(self.retryable_status_codes))

    @property
    def max_attempts(self) -> int:
        """Общее количество попыток (включая первую)."""
        return self.max_retries + 1

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _freeze_dict(d: Optional[Dict[str, str]]) -> Mapping[str, str]:
    """
    Convert dict to immutable MappingProxyType.

    Example:
        >>> frozen = _freeze_dict({"X-Trace": "1"})
        >>> frozen["X-New"] = "value"  # Raises TypeError
    """
    if d is None:
        return MappingProxyType({})
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class ClientConfig:
    """
    Главная конфигурация Postmark клиента.

    Args:
        request_host: Хост API (по умолчанию api.postmarkapp.com)
        use_https: Использовать https схему
        base_url: Полный базовый URL; если не указан, строится из
            use_https и request_host
        headers: Дополнительные заголовки для каждого запроса
        timeout: Конфигурация таймаутов
        retry: Конфигурация retry
        logging: Конфигурация логирования (None = без логирования)

    Examples:
        >>> config = ClientConfig()
        >>> config.base_url
        'https://api.postmarkapp.com'
        >>> config = ClientConfig.create(timeout=30, max_retries=1)
    """
    request_host: str = DEFAULT_REQUEST_HOST
    use_https: bool = True
    base_url: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Derive base_url and freeze mutable dicts."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', _freeze_dict(self.headers))

        if not self.request_host:
            raise ValueError("request_host must not be empty")

        if self.base_url:
            normalized = self.base_url.rstrip('/')
        else:
            scheme = "https" if self.use_https else "http"
            normalized = f"{scheme}://{self.request_host}"
        object.__setattr__(self, 'base_url', normalized)

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        request_host: Optional[str] = None,
        use_https: bool = True,
        timeout: Union[int, float, TimeoutConfig] = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        retry: Optional[RetryConfig] = None,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'ClientConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            base_url: Базовый URL (переопределяет request_host/use_https)
            request_host: Хост API
            use_https: https или http
            timeout: Таймаут (число секунд или TimeoutConfig)
            max_retries: Количество повторов (игнорируется, если передан retry)
            retry: Полная RetryConfig
            headers: Дополнительные заголовки
            logging: Конфигурация логирования

        Examples:
            >>> config = ClientConfig.create(timeout=60)
            >>> config = ClientConfig.create(request_host="api.example.test", use_https=False)
        """
        if isinstance(timeout, TimeoutConfig):
            timeout_cfg = timeout
        else:
            timeout_cfg = TimeoutConfig(total=float(timeout))

        retry_cfg = retry if retry is not None else RetryConfig(max_retries=max_retries)

        return cls(
            request_host=request_host or DEFAULT_REQUEST_HOST,
            use_https=use_https,
            base_url=base_url,
            headers=headers or {},
            timeout=timeout_cfg,
            retry=retry_cfg,
            logging=logging,
        )

    def with_timeout(self, timeout: Union[int, float, TimeoutConfig]) -> 'ClientConfig':
        """
        Создать новый конфиг с изменённым timeout.

        Example:
            >>> new_config = config.with_timeout(60)
        """
        if not isinstance(timeout, TimeoutConfig):
            timeout = TimeoutConfig(total=float(timeout))
        return replace(self, timeout=timeout)

    def with_retries(self, max_retries: int) -> 'ClientConfig':
        """
        Создать новый конфиг с другим числом повторов.

        Остальные параметры retry (backoff, статус коды) сохраняются.

        Example:
            >>> new_config = config.with_retries(5)
        """
        return replace(self, retry=replace(self.retry, max_retries=max_retries))

    def with_retry(self, retry: RetryConfig) -> 'ClientConfig':
        """Создать новый конфиг с полностью заменённой RetryConfig."""
        return replace(self, retry=retry)

    def with_headers(self, headers: Dict[str, str]) -> 'ClientConfig':
        """
        Создать новый конфиг с дополнительными заголовками.

        Example:
            >>> new_config = config.with_headers({"X-Request-Source": "billing"})
        """
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)
