"""rapi - Send one HTTP request and classify its response."""

__version__ = "0.1.0"

from .models import (
    BaseRequest,
    GetRequest,
    PostRequest,
    StatusHandler,
)

from .executor import (
    RequestExecutor,
    AsyncRequestExecutor,
    post_json,
    get_json,
    get_plain,
    apost_json,
    aget_json,
    aget_plain,
)

from .errors import (
    RapiError,
    RequestBuildError,
    TransportError,
    StatusError,
    NotImplementedStatusError,
    UnexpectedStatusError,
    BodyReadError,
    DecodeError,
)

from .client import create_client, create_async_client
from .config import RapiSettings, LoggingSettings
from .utils.logging import setup_logging

__all__ = [
    # Models
    "BaseRequest",
    "GetRequest",
    "PostRequest",
    "StatusHandler",
    # Executors
    "RequestExecutor",
    "AsyncRequestExecutor",
    "post_json",
    "get_json",
    "get_plain",
    "apost_json",
    "aget_json",
    "aget_plain",
    # Errors
    "RapiError",
    "RequestBuildError",
    "TransportError",
    "StatusError",
    "NotImplementedStatusError",
    "UnexpectedStatusError",
    "BodyReadError",
    "DecodeError",
    # Clients and configuration
    "create_client",
    "create_async_client",
    "RapiSettings",
    "LoggingSettings",
    "setup_logging",
]
