"""
Configuration from environment variables and .env files.

Example .env file:
    MOVIES_CLIENT_BASE_URL=http://localhost:8081
    MOVIES_CLIENT_TIMEOUT_CONNECT=5
    MOVIES_CLIENT_TIMEOUT_READ=5
    MOVIES_CLIENT_LOG_LEVEL=DEBUG
    MOVIES_CLIENT_LOG_FORMAT=json
"""

from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import ClientConfig, TimeoutConfig
from .logging.config import LoggingConfig


class MoviesClientSettings(BaseSettings):
    """
    Settings read from MOVIES_CLIENT_* variables, then .env, then defaults.

    Usage:
        >>> settings = MoviesClientSettings()
        >>> settings.base_url
        'http://localhost:8081'
    """

    model_config = SettingsConfigDict(
        env_prefix='MOVIES_CLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    base_url: str = Field(default="http://localhost:8081", description="Movies service base URL")

    timeout_connect: float = Field(default=5.0, gt=0)
    timeout_read: float = Field(default=5.0, gt=0)

    verify_ssl: bool = Field(default=True)

    # Logging is off unless a level is given
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_format: Literal["json", "text"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_file_path: Optional[str] = None

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper() or None
        return v

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    def to_logging_config(self) -> Optional[LoggingConfig]:
        if self.log_level is None:
            return None
        return LoggingConfig.create(
            level=self.log_level,
            format=self.log_format,
            enable_console=self.log_enable_console,
            enable_file=self.log_file_path is not None,
            file_path=self.log_file_path,
        )


def load_from_env(env_file: Optional[str] = '.env', **overrides: Any) -> ClientConfig:
    """
    Build ClientConfig from the environment.

    Priority (highest to lowest):
    1. **overrides (same names as MoviesClientSettings fields)
    2. MOVIES_CLIENT_* environment variables
    3. env_file
    4. Defaults

    Example:
        >>> config = load_from_env(timeout_read=1)
    """
    settings = MoviesClientSettings(_env_file=env_file, **overrides)

    return ClientConfig(
        base_url=settings.base_url,
        timeout=TimeoutConfig(connect=settings.timeout_connect, read=settings.timeout_read),
        verify_ssl=settings.verify_ssl,
        logging=settings.to_logging_config(),
    )
