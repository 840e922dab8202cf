"""
Иерархия исключений movies-client.

Классификация:
- ServerError - сервер ответил, но статус не 2xx
- TransportError - корректного ответа не получено вообще

Оба вида наследуются от MoviesClientError, поэтому вызывающему коду
достаточно одного except.
"""

from typing import Optional

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MoviesClientError(Exception):
    """Базовое исключение movies-client."""

    def __init__(self, message: str, url: Optional[str] = None, method: Optional[str] = None):
        self.message = message
        self.url = url
        self.method = method
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОТВЕТ СЕРВЕРА (non-2xx)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ServerError(MoviesClientError):
    """
    Сервер вернул статус вне диапазона 2xx.

    Сообщение равно телу ответа, если оно не пустое,
    иначе статусной строке ("503 Service Unavailable").

    Args:
        status_code: HTTP статус код
        url: URL запроса
        body: Тело ответа (текст)
        reason: Reason phrase из статусной строки
        method: HTTP метод
    """

    def __init__(
        self,
        status_code: int,
        url: Optional[str] = None,
        body: str = "",
        reason: str = "",
        method: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.reason = reason

        if body:
            msg = body
        else:
            msg = f"{status_code} {reason}".strip()

        super().__init__(msg, url=url, method=method)

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ТРАНСПОРТ (ответа нет)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(MoviesClientError):
    """
    Корректный ответ не получен.

    Примеры: connection refused, таймаут, соединение закрыто
    до или во время ответа, мусор вместо HTTP, невалидное тело.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        method: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.cause = cause
        full_message = message
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message, url=url, method=method)


class TimeoutError(TransportError):
    """
    Таймаут подключения или чтения.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout: Значение таймаута (сек)
        timeout_type: 'connect' или 'read'
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        timeout_type: Optional[str] = None,
        method: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.timeout = timeout
        self.timeout_type = timeout_type

        msg = message
        if timeout_type:
            msg += f" ({timeout_type} timeout"
            if timeout:
                msg += f": {timeout}s"
            msg += ")"

        super().__init__(msg, url=url, method=method, cause=cause)


class ConnectionError(TransportError):
    """
    Ошибка соединения.

    Примеры:
    - Connection refused
    - Connection reset by peer
    - Соединение закрыто до ответа или посреди тела
    - Невалидная статусная строка
    """
    pass


class InvalidResponseError(TransportError):
    """
    Ответ 2xx, но тело не удалось декодировать.

    Примеры:
    - Битый JSON
    - Объект вместо массива и наоборот
    - Поле неверного типа
    """
    pass
