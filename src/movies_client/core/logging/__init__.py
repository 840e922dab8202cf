"""
Logging system for movies-client.

Example:
    >>> from movies_client.core.logging import ClientLogger, LoggingConfig
    >>> config = LoggingConfig.create(level="DEBUG", format="json")
    >>> logger = ClientLogger(config)
    >>> logger.info("Request started", method="GET", url="http://localhost:8081")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import ClientLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
    correlation_scope,
)
from .handlers import build_handlers, create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "ClientLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    "correlation_scope",
    # Handlers
    "build_handlers",
    "create_console_handler",
    "create_file_handler",
]
