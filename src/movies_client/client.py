# src/movies_client/client.py
from typing import Any, List, Optional

import requests

from .core.config import ClientConfig
from .core.exceptions import InvalidResponseError, MoviesClientError, ServerError
from .core.http_client import HTTPClient
from .endpoints import (
    ADD_MOVIE_V1,
    GET_ALL_MOVIES_V1,
    MOVIE_BY_NAME_V1,
    MOVIE_BY_YEAR_V1,
    movie_by_id_path,
    with_query,
)
from .models import Movie

APPLICATION_JSON = "application/json"
TEXT_PLAIN = "text/plain"

JSON_ACCEPT = {"Accept": APPLICATION_JSON}
JSON_BODY = {"Accept": APPLICATION_JSON, "Content-Type": APPLICATION_JSON}
TEXT_ACCEPT = {"Accept": TEXT_PLAIN}


class MoviesRestClient:
    """
    Клиент movies service.

    Каждая операция - ровно один синхронный HTTP запрос. Ретраев, кеша и
    состояния между вызовами нет. Любая ошибка (ответ не 2xx, сбой
    транспорта, невалидное тело) поднимается как MoviesClientError:
    ServerError или TransportError.

    Example:
        >>> with MoviesRestClient(base_url="http://localhost:8081") as client:
        ...     movies = client.retrieve_movies_by_name("Avengers")
        ...     created = client.add_movie(Movie(name="Toy Story 4", year=2019))
    """

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        config: Optional[ClientConfig] = None,
        base_url: Optional[str] = None,
        **kwargs: Any
    ):
        """
        Args:
            http_client: Готовый транспорт (приоритет над config и base_url)
            config: ClientConfig для создания транспорта
            base_url: Base URL, если нет ни http_client, ни config
            **kwargs: Параметры ClientConfig.create (timeout, headers, logging, ...)
        """
        if http_client is None:
            if config is None:
                config = ClientConfig.create(base_url=base_url, **kwargs)
            http_client = HTTPClient(config=config)
        self._http = http_client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        self._http.close()

    @property
    def http_client(self) -> HTTPClient:
        return self._http

    # ==================== Чтение ====================

    def retrieve_all_movies(self) -> List[Movie]:
        """GET allMovies. Пустое тело 2xx -> пустой список."""
        operation = "retrieve_all_movies"
        response = self._send(operation, "GET", GET_ALL_MOVIES_V1, headers=JSON_ACCEPT)
        return self._decode_movies(operation, response)

    def retrieve_movie_by_id(self, movie_id: int) -> Movie:
        operation = "retrieve_movie_by_id"
        response = self._send(operation, "GET", movie_by_id_path(movie_id), headers=JSON_ACCEPT)
        return self._decode_movie(operation, response)

    def retrieve_movies_by_name(self, movie_name: str) -> List[Movie]:
        """Совпадений нет -> сервер отвечает 404 -> ServerError."""
        operation = "retrieve_movies_by_name"
        endpoint = with_query(MOVIE_BY_NAME_V1, movie_name=movie_name)
        response = self._send(operation, "GET", endpoint, headers=JSON_ACCEPT)
        return self._decode_movies(operation, response)

    def retrieve_movies_by_year(self, year: int) -> List[Movie]:
        operation = "retrieve_movies_by_year"
        endpoint = with_query(MOVIE_BY_YEAR_V1, year=year)
        response = self._send(operation, "GET", endpoint, headers=JSON_ACCEPT)
        return self._decode_movies(operation, response)

    # ==================== Запись ====================

    def add_movie(self, movie: Movie) -> Movie:
        """POST movie. Возвращает фильм с назначенным сервером movie_id."""
        operation = "add_movie"
        response = self._send(operation, "POST", ADD_MOVIE_V1, headers=JSON_BODY, json=movie.to_wire())
        return self._decode_movie(operation, response)

    def update_movie(self, movie_id: int, movie: Movie) -> Movie:
        operation = "update_movie"
        response = self._send(
            operation, "PUT", movie_by_id_path(movie_id), headers=JSON_BODY, json=movie.to_wire()
        )
        return self._decode_movie(operation, response)

    def delete_movie_by_id(self, movie_id: int) -> str:
        """DELETE movie/{id}. Возвращает текстовое подтверждение сервера."""
        response = self._send("delete_movie_by_id", "DELETE", movie_by_id_path(movie_id), headers=TEXT_ACCEPT)
        return response.text

    def delete_movie_by_name(self, movie_name: str) -> str:
        endpoint = with_query(MOVIE_BY_NAME_V1, movie_name=movie_name)
        response = self._send("delete_movie_by_name", "DELETE", endpoint, headers=TEXT_ACCEPT)
        return response.text

    # ==================== Внутренние методы ====================

    def _send(self, operation: str, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        try:
            return self._http.request(method, endpoint, **kwargs)
        except MoviesClientError as e:
            self._log_failure(operation, e)
            raise

    def _decode_movie(self, operation: str, response: requests.Response) -> Movie:
        try:
            return Movie.from_wire(self._json(response))
        except InvalidResponseError as e:
            error = self._with_request(e, response)
            self._log_failure(operation, error)
            if error is e:
                raise
            raise error from e

    def _decode_movies(self, operation: str, response: requests.Response) -> List[Movie]:
        # Пустое тело у списка трактуется как пустой массив
        if not response.content.strip():
            return []
        try:
            return Movie.list_from_wire(self._json(response))
        except InvalidResponseError as e:
            error = self._with_request(e, response)
            self._log_failure(operation, error)
            if error is e:
                raise
            raise error from e

    @staticmethod
    def _request_method(response: requests.Response) -> Optional[str]:
        return response.request.method if response.request is not None else None

    @classmethod
    def _json(cls, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Malformed JSON response: {e}",
                url=str(response.url),
                method=cls._request_method(response),
                cause=e,
            ) from e

    @classmethod
    def _with_request(cls, error: InvalidResponseError, response: requests.Response) -> InvalidResponseError:
        """Ошибка декодирования с URL и методом запроса (и суффиксом url в сообщении)."""
        if error.url is not None:
            return error
        return InvalidResponseError(
            error.message,
            url=str(response.url),
            method=cls._request_method(response),
            cause=error.cause,
        )

    def _log_failure(self, operation: str, error: MoviesClientError) -> None:
        logger = self._http.logger
        if logger is None:
            return

        if isinstance(error, ServerError):
            logger.error(
                f"{operation} failed",
                operation=operation,
                status_code=error.status_code,
                body=logger.config.truncate_body(error.body),
                url=error.url,
            )
        else:
            logger.error(
                f"{operation} failed",
                operation=operation,
                error=str(error),
                error_type=type(error).__name__,
                url=error.url,
            )
