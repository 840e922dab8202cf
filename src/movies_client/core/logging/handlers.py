"""
Output handlers for the client loggers.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Sequence

from .config import LoggingConfig
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .formatters import get_formatter


def _attach(handler: logging.Handler, level: int, formatter: logging.Formatter,
            filters: Optional[Sequence[logging.Filter]]) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    for f in filters or ():
        handler.addFilter(f)
    return handler


def create_console_handler(
    level: int,
    formatter: logging.Formatter,
    filters: Optional[Sequence[logging.Filter]] = None
) -> logging.StreamHandler:
    """stdout handler."""
    return _attach(logging.StreamHandler(sys.stdout), level, formatter, filters)


def create_file_handler(
    file_path: str,
    level: int,
    formatter: logging.Formatter,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    filters: Optional[Sequence[logging.Filter]] = None
) -> RotatingFileHandler:
    """
    Rotating file handler; missing parent directories are created.

    Rotation keeps movies_client.log, movies_client.log.1 ... .<backup_count>.
    """
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    return _attach(handler, level, formatter, filters)


def build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    """
    Handlers described by config, sharing one formatter and filter chain.

    Returns an empty list when both console and file output are off.
    """
    filters: List[logging.Filter] = []
    if config.enable_correlation_id:
        filters.append(CorrelationIdFilter())
    if config.extra_fields:
        filters.append(ExtraFieldsFilter(config.extra_fields))

    formatter = get_formatter(config.format.value)
    level = config.level_number

    handlers: List[logging.Handler] = []
    if config.enable_console:
        handlers.append(create_console_handler(level, formatter, filters))
    if config.enable_file and config.file_path:
        handlers.append(
            create_file_handler(
                config.file_path, level, formatter,
                max_bytes=config.max_bytes,
                backup_count=config.backup_count,
                filters=filters,
            )
        )
    return handlers
