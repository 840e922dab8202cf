# src/movies_client/core/http_client.py
from typing import Any, Dict, Optional
import itertools
import time
import uuid
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_handler import ErrorHandler
from .exceptions import MoviesClientError
from .logging import ClientLogger
from .logging.filters import correlation_scope
from .session_manager import ThreadSafeSessionManager

CORRELATION_HEADER = "X-Correlation-ID"

# Суффикс имени логгера: у каждого клиента свой logging.Logger
_client_ids = itertools.count(1)


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 2)


class HTTPClient:
    """
    Синхронный HTTP транспорт поверх requests.

    Features:
        - Thread-local сессии: параллельные вызовы не делят состояние
        - Один запрос на вызов, без ретраев (HTTPAdapter max_retries=0)
        - Таймауты (connect, read) на каждый запрос
        - Любой статус вне 2xx -> ServerError, сбой транспорта -> TransportError
        - Структурное логирование с correlation ID
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        **kwargs
    ):
        """
        Args:
            base_url: Base URL (используется если config не передан)
            config: ClientConfig instance
            **kwargs: Параметры для ClientConfig.create (timeout, headers, ...)
        """
        if config is None:
            config = ClientConfig.create(base_url=base_url, **kwargs)

        self._config = config
        self._error_handler = ErrorHandler()

        self._logger: Optional[ClientLogger] = None
        if config.logging:
            logger_name = "movies_client.http"
            if config.base_url:
                netloc = urlparse(config.base_url).netloc
                if netloc:
                    logger_name = f"{logger_name}.{netloc}"
            logger_name = f"{logger_name}.{next(_client_ids)}"
            self._logger = ClientLogger(config=config.logging, name=logger_name)

        self._session_manager = ThreadSafeSessionManager(session_factory=self._create_session)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        # Ретраев нет: одна неудачная попытка сразу возвращается вызывающему
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        if self._config.headers:
            session.headers.update(self._config.headers)

        return session

    # ==================== Жизненный цикл ====================

    def close(self):
        """Закрывает сессии всех потоков и handlers логгера."""
        if self._logger is not None:
            self._logger.close()
        self._session_manager.close_all()

    def health_check(self, test_url: Optional[str] = None, timeout: float = 5.0) -> Dict[str, Any]:
        """
        Диагностика клиента.

        Args:
            test_url: Если указан, выполняется HEAD запрос (любой ответ = reachable)
            timeout: Таймаут тестового запроса (сек)

        Returns:
            {"healthy", "base_url", "active_sessions", "config", "connectivity"}
        """
        result: Dict[str, Any] = {
            "healthy": True,
            "base_url": self.base_url,
            "active_sessions": self._session_manager.get_active_sessions_count(),
            "config": {
                "timeout_connect": self._config.timeout.connect,
                "timeout_read": self._config.timeout.read,
                "verify_ssl": self._config.verify_ssl,
            },
            "connectivity": None,
        }

        if test_url:
            connectivity: Dict[str, Any] = {
                "url": test_url,
                "reachable": False,
                "response_time_ms": None,
                "status_code": None,
                "error": None,
            }
            start_time = time.monotonic()
            try:
                response = self.session.head(test_url, timeout=timeout, verify=self._config.verify_ssl)
            except requests.exceptions.RequestException as e:
                error = self._error_handler.classify_request_exception(e, test_url, "HEAD", timeout)
                connectivity["error"] = f"{type(error).__name__}: {str(error)[:100]}"
                result["healthy"] = False
            else:
                connectivity["reachable"] = True
                connectivity["response_time_ms"] = _elapsed_ms(start_time)
                connectivity["status_code"] = response.status_code

            result["connectivity"] = connectivity

        return result

    # ==================== Запросы ====================

    def _build_url(self, endpoint: str) -> str:
        """Склеивает base_url и endpoint; абсолютный URL возвращается как есть."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint

        endpoint = endpoint.lstrip("/")
        base = self._config.base_url
        if base:
            return f"{base}/{endpoint}"
        return endpoint

    def request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        """
        Выполнить один HTTP запрос.

        Args:
            method: HTTP метод
            endpoint: Путь относительно base_url (может содержать query) или полный URL
            **kwargs: Параметры requests (headers, json, data, params, timeout)

        Returns:
            Response со статусом 2xx

        Raises:
            ServerError: Ответ получен, статус не 2xx
            TransportError: Ответ не получен или не дочитан
        """
        url = self._build_url(endpoint)

        headers = dict(kwargs.pop('headers', None) or {})
        correlation_id = headers.setdefault(CORRELATION_HEADER, str(uuid.uuid4()))
        timeout = kwargs.pop('timeout', self._config.timeout.as_tuple())

        with correlation_scope(correlation_id):
            self._log_info("Request started", method=method, url=url, timeout=timeout,
                           has_json="json" in kwargs)
            start_time = time.monotonic()
            try:
                response = self._send(method, url, headers, timeout, **kwargs)
            except MoviesClientError as e:
                if self._logger:
                    self._logger.error(
                        "Request failed",
                        method=method,
                        url=url,
                        error=str(e),
                        error_type=type(e).__name__,
                        status_code=getattr(e, 'status_code', None),
                        duration_ms=_elapsed_ms(start_time),
                    )
                raise

            self._log_info(
                "Request completed",
                method=method,
                url=url,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start_time),
                response_size=len(response.content),
            )
            return response

    def _send(self, method: str, url: str, headers: Dict[str, str], timeout: Any, **kwargs: Any) -> requests.Response:
        """Один запрос без логирования: 2xx -> Response, иначе исключение."""
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=timeout,
                verify=self._config.verify_ssl,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            self._error_handler.handle_request_exception(e, url, method, timeout)

        self._error_handler.handle_http_error(response)
        return response

    def _log_info(self, message: str, **fields: Any) -> None:
        if self._logger:
            self._logger.info(message, **fields)

    def get(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("POST", endpoint, **kwargs)

    def put(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("PUT", endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> requests.Response:
        return self.request("DELETE", endpoint, **kwargs)

    # ==================== Свойства ====================

    @property
    def session(self) -> requests.Session:
        """Сессия текущего потока (создаётся лениво)."""
        return self._session_manager.get_session()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def logger(self) -> Optional[ClientLogger]:
        """Логгер клиента или None, если логирование не настроено."""
        return self._logger

    @property
    def base_url(self) -> Optional[str]:
        """Base URL (read-only)."""
        return self._config.base_url

    @property
    def timeout(self):
        """(connect, read) таймауты."""
        return self._config.timeout.as_tuple()
