"""
Structured logger used by the transport and the movies client.
"""

import logging
from typing import Optional, Any, Dict

from .config import LoggingConfig
from .handlers import build_handlers
from ...utils.sanitizer import mask_sensitive_data


class ClientLogger:
    """
    Thin wrapper over logging.Logger.

    Keyword arguments become record fields (via extra=) after sensitive
    values are masked. The underlying logger does not propagate: the
    client writes only through the handlers its LoggingConfig describes.

    Example:
        >>> logger = ClientLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request started", method="GET", url="http://localhost:8081")
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "movies_client"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        self._logger = logging.getLogger(name)
        self._logger.setLevel(self.config.level_number)
        self._logger.propagate = False

        # Only handlers created here are ours to close; other ClientLoggers
        # bound to the same logging.Logger keep theirs
        self._handlers = build_handlers(self.config)
        for handler in self._handlers:
            self._logger.addHandler(handler)

    def _log(self, level: int, message: str, fields: Dict[str, Any], exc_info: bool = False) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra=mask_sensitive_data(fields), exc_info=exc_info)

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)

    def exception(self, message: str, **fields: Any) -> None:
        """ERROR with traceback; call from an except block."""
        self._log(logging.ERROR, message, fields, exc_info=True)

    def _release(self, handler: logging.Handler) -> None:
        self._logger.removeHandler(handler)
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            # Stream already closed underneath the handler
            pass

    def close(self) -> None:
        """Flush and close handlers. Idempotent."""
        if self._closed:
            return
        for handler in self._handlers:
            self._release(handler)
        self._handlers = []
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
