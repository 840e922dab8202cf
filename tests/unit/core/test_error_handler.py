"""
Tests for ErrorHandler: requests exceptions and HTTP statuses mapping.
"""

import pytest
import requests
from requests.exceptions import (
    ChunkedEncodingError,
    ConnectTimeout,
    ContentDecodingError,
    InvalidJSONError,
    ReadTimeout,
    TooManyRedirects,
)

from movies_client.core.error_handler import ErrorHandler
from movies_client.core.exceptions import (
    ConnectionError,
    InvalidResponseError,
    ServerError,
    TimeoutError,
    TransportError,
)

URL = "http://localhost:8081/movieservice/v1/allMovies"


def make_response(status_code, body=b"", reason="", method="GET"):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.reason = reason
    response.url = URL
    response.request = requests.Request(method, URL).prepare()
    return response


class TestIsSuccess:

    @pytest.mark.parametrize("status", [200, 201, 203, 204, 299])
    def test_2xx(self, status):
        assert ErrorHandler.is_success(status)

    @pytest.mark.parametrize("status", [100, 199, 300, 304, 400, 404, 500, 503])
    def test_not_2xx(self, status):
        assert not ErrorHandler.is_success(status)


class TestClassifyRequestException:

    def test_connect_timeout(self):
        error = ErrorHandler.classify_request_exception(ConnectTimeout("boom"), URL, "GET", (1, 2))

        assert isinstance(error, TimeoutError)
        assert error.timeout_type == "connect"
        assert error.timeout == 1

    def test_read_timeout(self):
        error = ErrorHandler.classify_request_exception(ReadTimeout("boom"), URL, "GET", (1, 2))

        assert error.timeout_type == "read"
        assert error.timeout == 2

    def test_scalar_timeout(self):
        error = ErrorHandler.classify_request_exception(ReadTimeout("boom"), URL, "GET", 3)

        assert error.timeout == 3

    def test_connection_error(self):
        error = ErrorHandler.classify_request_exception(
            requests.exceptions.ConnectionError("Connection refused"), URL, "POST"
        )

        assert isinstance(error, ConnectionError)
        assert error.method == "POST"
        assert error.url == URL
        assert "Connection refused" in str(error)

    @pytest.mark.parametrize("exc_class", [ChunkedEncodingError, ContentDecodingError])
    def test_broken_body_is_connection_error(self, exc_class):
        error = ErrorHandler.classify_request_exception(exc_class("broken"), URL)

        assert isinstance(error, ConnectionError)
        assert "prematurely" in str(error)

    def test_invalid_json(self):
        error = ErrorHandler.classify_request_exception(InvalidJSONError("bad"), URL)

        assert isinstance(error, InvalidResponseError)

    def test_other_request_exception(self):
        error = ErrorHandler.classify_request_exception(TooManyRedirects("loop"), URL)

        assert type(error) is TransportError
        assert isinstance(error.cause, TooManyRedirects)

    def test_own_exception_passed_through(self):
        original = ConnectionError("already mapped")

        assert ErrorHandler.classify_request_exception(original, URL) is original


class TestHandleRequestException:

    def test_raises_from_original(self):
        original = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ConnectionError) as exc_info:
            ErrorHandler.handle_request_exception(original, URL, "GET")

        assert exc_info.value.__cause__ is original


class TestHandleHttpError:

    def test_success_does_nothing(self):
        ErrorHandler.handle_http_error(make_response(200, b"[]"))

    def test_body_becomes_message(self):
        with pytest.raises(ServerError) as exc_info:
            ErrorHandler.handle_http_error(make_response(503, b"Service Unavailable", "Service Unavailable"))

        error = exc_info.value
        assert str(error) == "Service Unavailable"
        assert error.status_code == 503
        assert error.url == URL
        assert error.method == "GET"

    def test_empty_body_uses_status_line(self):
        with pytest.raises(ServerError) as exc_info:
            ErrorHandler.handle_http_error(make_response(500, b"", "Internal Server Error"))

        assert str(exc_info.value) == "500 Internal Server Error"

    def test_redirect_status_is_error(self):
        with pytest.raises(ServerError) as exc_info:
            ErrorHandler.handle_http_error(make_response(302, b"", "Found", method="DELETE"))

        assert exc_info.value.status_code == 302
        assert exc_info.value.method == "DELETE"

    def test_none_response(self):
        with pytest.raises(TransportError):
            ErrorHandler.handle_http_error(None)
