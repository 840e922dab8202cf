"""Core transport modules: config, errors, HTTP transport, logging."""

from .config import TimeoutConfig, ClientConfig
from .exceptions import (
    MoviesClientError,
    ServerError,
    TransportError,
    TimeoutError,
    ConnectionError,
    InvalidResponseError,
)
from .error_handler import ErrorHandler
from .http_client import HTTPClient
from .settings import MoviesClientSettings, load_from_env

__all__ = [
    # Config
    "TimeoutConfig",
    "ClientConfig",
    "MoviesClientSettings",
    "load_from_env",
    # Core
    "HTTPClient",
    "ErrorHandler",
    # Exceptions
    "MoviesClientError",
    "ServerError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "InvalidResponseError",
]
