"""
Record filters for the client loggers.

The transport binds the X-Correlation-ID of the request in flight to the
calling thread; CorrelationIdFilter copies it onto every record emitted
while that request runs.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional


_local = threading.local()


def set_correlation_id(correlation_id: str) -> None:
    _local.correlation_id = correlation_id


def get_correlation_id() -> Optional[str]:
    """Correlation ID bound to the current thread, or None."""
    return getattr(_local, 'correlation_id', None)


def clear_correlation_id() -> None:
    _local.correlation_id = None


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """
    Bind correlation_id for the duration of one request.

    The previous value (if any) is restored on exit, so nested scopes and
    errors inside the block leave the thread as they found it.

    Example:
        >>> with correlation_scope("req-12345"):
        ...     logger.info("Request started")  # correlation_id=req-12345
    """
    previous = get_correlation_id()
    set_correlation_id(correlation_id)
    try:
        yield correlation_id
    finally:
        _local.correlation_id = previous


class CorrelationIdFilter(logging.Filter):
    """Adds correlation_id to records emitted inside a correlation scope."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """
    Adds static fields from LoggingConfig.extra_fields to every record.

    Per-call fields win: a key already on the record is not overwritten.
    """

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = dict(extra_fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            record.__dict__.setdefault(key, value)
        return True
