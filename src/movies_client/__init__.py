"""movies-client - thin synchronous client for the movies REST service."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .client import MoviesRestClient
from .models import Movie
from .core.http_client import HTTPClient
from .core.config import ClientConfig, TimeoutConfig
from .core.settings import MoviesClientSettings, load_from_env
from .core.logging import LoggingConfig
from .core.exceptions import (
    MoviesClientError,
    ServerError,
    TransportError,
    TimeoutError,
    ConnectionError,
    InvalidResponseError,
)

# Library logging is silent until the application configures it
logging.getLogger('movies_client').addHandler(logging.NullHandler())

try:
    __version__ = version("movies-client")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    # Client
    "MoviesRestClient",
    "Movie",
    "HTTPClient",

    # Config
    "ClientConfig",
    "TimeoutConfig",
    "MoviesClientSettings",
    "load_from_env",
    "LoggingConfig",

    # Exceptions
    "MoviesClientError",
    "ServerError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "InvalidResponseError",

    "__version__",
]
