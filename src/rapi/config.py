"""rapi configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional

from .constants import DEFAULT_OK_STATUS_CODE, DEFAULT_CONNECTION_TIMEOUT, DEFAULT_READ_TIMEOUT


class RapiSettings(BaseSettings):
    """Request defaults and settings for clients built by rapi."""

    default_ok_status_code: int = Field(
        default=DEFAULT_OK_STATUS_CODE,
        description="Status code treated as success when a request does not set one"
    )
    connection_timeout: float = Field(default=DEFAULT_CONNECTION_TIMEOUT, description="Connection timeout in seconds")
    read_timeout: float = Field(default=DEFAULT_READ_TIMEOUT, description="Read timeout in seconds")
    follow_redirects: bool = Field(default=False, description="Follow redirects in clients built by rapi")
    user_agent: Optional[str] = Field(default=None, description="Default User-Agent header for clients built by rapi")

    class Config:
        env_prefix = "RAPI_"
        env_file = ".env"
        case_sensitive = False


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")

    class Config:
        env_prefix = "RAPI_LOG_"
        env_file = ".env"
        case_sensitive = False


settings = RapiSettings()
