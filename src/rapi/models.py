"""Request descriptors."""

from typing import Any, Callable, Dict, Optional

import httpx
from pydantic import BaseModel, Field

from . import config
from .executor import default_async_executor, default_executor

# Zero-argument callable invoked for a specific status code. A returned
# exception is raised as the outcome of the call; None completes the call.
StatusHandler = Callable[[], Optional[Exception]]


def _default_ok_status_code() -> int:
    return config.settings.default_ok_status_code


class BaseRequest(BaseModel):
    """Common description of an outbound HTTP call."""
    endpoint: str = Field(..., description="URL to send the request to")
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers included in the request")
    status_handlers: Dict[int, StatusHandler] = Field(
        default_factory=dict,
        description="Handlers overriding the classification of specific status codes"
    )
    ok_status_code: int = Field(
        default_factory=_default_ok_status_code,
        description="Status code indicating a successful request"
    )

    class Config:
        frozen = True
        arbitrary_types_allowed = True


class PostRequest(BaseRequest):
    """HTTP POST request."""
    payload: str = Field(default="", description="Body sent verbatim")

    def post(self, client: httpx.Client, result_type: Any = Any) -> Any:
        return default_executor.post_json(client, self, result_type)

    async def apost(self, client: httpx.AsyncClient, result_type: Any = Any) -> Any:
        return await default_async_executor.post_json(client, self, result_type)


class GetRequest(BaseRequest):
    """HTTP GET request."""

    def get(self, client: httpx.Client, result_type: Any = Any) -> Any:
        return default_executor.get_json(client, self, result_type)

    def get_plain(self, client: httpx.Client) -> Optional[str]:
        return default_executor.get_plain(client, self)

    async def aget(self, client: httpx.AsyncClient, result_type: Any = Any) -> Any:
        return await default_async_executor.get_json(client, self, result_type)

    async def aget_plain(self, client: httpx.AsyncClient) -> Optional[str]:
        return await default_async_executor.get_plain(client, self)
