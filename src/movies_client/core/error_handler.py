# src/movies_client/core/error_handler.py

from typing import Optional, Tuple, Union

import requests
from requests.exceptions import (
    ChunkedEncodingError,
    ConnectTimeout,
    ContentDecodingError,
    InvalidJSONError,
    RequestException,
    Timeout,
)
from requests.exceptions import (
    ConnectionError as RequestsConnectionError,
)

from .exceptions import (
    ConnectionError,
    InvalidResponseError,
    MoviesClientError,
    ServerError,
    TimeoutError,
    TransportError,
)

TimeoutValue = Union[float, Tuple[float, float], None]


class ErrorHandler:
    """Перевод ошибок requests и HTTP статусов в исключения movies-client"""

    @staticmethod
    def is_success(status_code: int) -> bool:
        return 200 <= status_code < 300

    @staticmethod
    def classify_request_exception(
        error: Exception,
        url: str,
        method: Optional[str] = None,
        timeout: TimeoutValue = None,
    ) -> MoviesClientError:
        """Возвращает наше исключение для исключения requests (без raise)"""

        if isinstance(error, MoviesClientError):
            return error

        if isinstance(error, Timeout):
            timeout_type = "connect" if isinstance(error, ConnectTimeout) else "read"
            if isinstance(timeout, tuple):
                limit = timeout[0] if timeout_type == "connect" else timeout[1]
            else:
                limit = timeout
            return TimeoutError(
                f"Request timed out: {error}", url,
                timeout=limit, timeout_type=timeout_type,
                method=method, cause=error,
            )

        elif isinstance(error, RequestsConnectionError):
            return ConnectionError(f"Connection error: {error}", url, method=method, cause=error)

        elif isinstance(error, (ChunkedEncodingError, ContentDecodingError)):
            # Соединение оборвалось или тело испорчено посреди ответа
            return ConnectionError(
                f"Connection closed prematurely during response: {error}",
                url, method=method, cause=error,
            )

        elif isinstance(error, InvalidJSONError):
            return InvalidResponseError(f"Malformed response body: {error}", url, method=method, cause=error)

        elif isinstance(error, RequestException):
            return TransportError(f"Request failed: {error}", url, method=method, cause=error)

        return TransportError(f"Unexpected error: {error}", url, method=method, cause=error)

    @staticmethod
    def handle_request_exception(
        error: Exception,
        url: str,
        method: Optional[str] = None,
        timeout: TimeoutValue = None,
    ) -> None:
        """Обрабатывает исключения requests и преобразует их в кастомные"""
        raise ErrorHandler.classify_request_exception(error, url, method, timeout) from error

    @staticmethod
    def handle_http_error(response: requests.Response) -> None:
        """Raise ServerError для любого статуса вне 2xx"""

        if response is None:
            raise TransportError("HTTP error occurred but no response object available")

        if ErrorHandler.is_success(response.status_code):
            return

        request = getattr(response, "request", None)
        method = request.method if request is not None else None

        try:
            body = response.text or ""
        except RequestException as e:
            # Тело не дочитано - это уже транспортная ошибка
            ErrorHandler.handle_request_exception(e, str(response.url), method)

        raise ServerError(
            response.status_code,
            url=str(response.url),
            body=body,
            reason=response.reason or "",
            method=method,
        )
