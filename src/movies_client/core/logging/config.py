"""
Logging configuration for movies-client.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Union


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats: one JSON object per line or key=value text."""
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Configuration for client logging.

    Attributes:
        level: Minimum level written by the client loggers
        format: json (for log shippers) or text (for humans)
        enable_console: Write to stdout
        enable_file: Write to a rotating file
        file_path: Log file (required if enable_file=True)
        max_bytes: File size that triggers rotation (default: 10MB)
        backup_count: Rotated files kept next to the current one
        enable_correlation_id: Put the X-Correlation-ID of the request on each record
        max_body_chars: Server error bodies longer than this are cut in logs
        extra_fields: Static fields added to every record (service, environment, ...)

    Example:
        >>> config = LoggingConfig.create(level="DEBUG", format="json", enable_console=False,
        ...                               enable_file=True, file_path="logs/movies_client.log")
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    enable_console: bool = True
    enable_file: bool = False
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    enable_correlation_id: bool = True
    max_body_chars: int = 2000
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.enable_file and not self.file_path:
            raise ValueError("file_path is required when enable_file=True")
        if self.max_bytes < 0 or self.backup_count < 0:
            raise ValueError("max_bytes and backup_count must not be negative")
        if self.max_body_chars <= 0:
            raise ValueError("max_body_chars must be positive")

    @property
    def level_number(self) -> int:
        """Numeric level for the stdlib logging module (logging.DEBUG, ...)."""
        return getattr(logging, self.level.value)

    def truncate_body(self, body: str) -> str:
        if len(body) <= self.max_body_chars:
            return body
        return f"{body[:self.max_body_chars]}... ({len(body)} chars)"

    @classmethod
    def create(
        cls,
        level: Union[str, LogLevel] = "INFO",
        format: Union[str, LogFormat] = "text",
        enable_console: bool = True,
        enable_file: bool = False,
        file_path: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        enable_correlation_id: bool = True,
        max_body_chars: int = 2000,
        extra_fields: Optional[Dict[str, Any]] = None
    ) -> "LoggingConfig":
        """
        Create LoggingConfig from plain values, case-insensitive.

        Raises:
            ValueError: unknown level or format name
        """
        return cls(
            level=LogLevel(str(getattr(level, "value", level)).upper()),
            format=LogFormat(str(getattr(format, "value", format)).lower()),
            enable_console=enable_console,
            enable_file=enable_file,
            file_path=file_path,
            max_bytes=max_bytes,
            backup_count=backup_count,
            enable_correlation_id=enable_correlation_id,
            max_body_chars=max_body_chars,
            extra_fields=extra_fields or {}
        )
