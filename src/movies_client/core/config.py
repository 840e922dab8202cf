"""
Конфигурация movies-client.

Все конфиги immutable (frozen dataclasses), поэтому один экземпляр
можно безопасно разделять между потоками.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

Number = Union[int, float]

DEFAULT_CONNECT_TIMEOUT = 5
DEFAULT_READ_TIMEOUT = 5

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения/записи (сек), считается между байтами ответа

    Examples:
        >>> TimeoutConfig()                    # 5s / 5s
        >>> TimeoutConfig(connect=2, read=0.5)
    """
    connect: Number = DEFAULT_CONNECT_TIMEOUT
    read: Number = DEFAULT_READ_TIMEOUT

    def __post_init__(self):
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[Number, Number]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

    @classmethod
    def coerce(cls, value: Union[Number, Tuple[Number, Number], "TimeoutConfig"]) -> "TimeoutConfig":
        """Число -> read timeout, кортеж -> (connect, read), TimeoutConfig как есть."""
        if isinstance(value, TimeoutConfig):
            return value
        if isinstance(value, tuple):
            return cls(connect=value[0], read=value[1])
        return cls(read=value)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _freeze_dict(d: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if d is None:
        return MappingProxyType({})
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class ClientConfig:
    """
    Главная конфигурация клиента.

    Args:
        base_url: Базовый URL сервиса (например "http://localhost:8081")
        headers: Дефолтные заголовки для каждого запроса
        timeout: Конфигурация таймаутов
        verify_ssl: Проверять SSL сертификаты
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> config = ClientConfig(base_url="http://localhost:8081")
        >>> config = ClientConfig.create("http://localhost:8081", timeout=(2, 5))
    """
    base_url: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    verify_ssl: bool = True
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Normalize base_url and freeze headers."""
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, 'headers', _freeze_dict(self.headers))

        if self.base_url:
            normalized = self.base_url.rstrip('/')
            if normalized != self.base_url:
                object.__setattr__(self, 'base_url', normalized)

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        timeout: Union[Number, Tuple[Number, Number], TimeoutConfig] = DEFAULT_READ_TIMEOUT,
        connect_timeout: Optional[Number] = None,
        read_timeout: Optional[Number] = None,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'ClientConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            base_url: Базовый URL
            timeout: Таймаут (число = read, (connect, read) или TimeoutConfig)
            connect_timeout: Таймаут подключения (переопределяет timeout)
            read_timeout: Таймаут чтения (переопределяет timeout)
            verify_ssl: Проверять SSL
            headers: Заголовки
            logging: Конфигурация логирования

        Examples:
            >>> ClientConfig.create("http://localhost:8081", read_timeout=1)
            >>> ClientConfig.create(timeout=(1, 2))
        """
        # Явные connect_timeout / read_timeout переопределяют только свою половину timeout
        overrides = {
            name: value
            for name, value in (("connect", connect_timeout), ("read", read_timeout))
            if value is not None
        }
        timeout_cfg = replace(TimeoutConfig.coerce(timeout), **overrides)

        return cls(
            base_url=base_url,
            headers=headers or {},
            timeout=timeout_cfg,
            verify_ssl=verify_ssl,
            logging=logging,
        )

    def with_timeout(self, timeout: Union[Number, Tuple[Number, Number], TimeoutConfig]) -> 'ClientConfig':
        """Новый конфиг с изменённым timeout."""
        return ClientConfig(
            base_url=self.base_url,
            headers=self.headers,
            timeout=TimeoutConfig.coerce(timeout),
            verify_ssl=self.verify_ssl,
            logging=self.logging,
        )

    def with_headers(self, headers: Mapping[str, str]) -> 'ClientConfig':
        """Новый конфиг, заголовки объединены с существующими."""
        merged = dict(self.headers)
        merged.update(headers)

        return ClientConfig(
            base_url=self.base_url,
            headers=merged,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
            logging=self.logging,
        )
