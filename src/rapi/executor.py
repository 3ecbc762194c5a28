"""Request executors: send one request and classify its response."""

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

import httpx
from pydantic import TypeAdapter, ValidationError

from .constants import METHOD_GET, METHOD_POST, NOT_IMPLEMENTED_STATUS_CODE
from .errors import (
    BodyReadError,
    DecodeError,
    NotImplementedStatusError,
    RequestBuildError,
    TransportError,
    UnexpectedStatusError,
)

if TYPE_CHECKING:
    from .models import BaseRequest, GetRequest, PostRequest

# Turns the fully read body into the call's result.
ResultSink = Callable[[bytes, httpx.Response], Any]


def json_sink(result_type: Any = Any) -> ResultSink:
    """Build a sink decoding the body as JSON into ``result_type``."""
    adapter = TypeAdapter(result_type)

    def decode(body: bytes, response: httpx.Response) -> Any:
        try:
            return adapter.validate_json(body)
        except ValidationError as e:
            raise DecodeError(e) from e

    return decode


def text_sink(body: bytes, response: httpx.Response) -> str:
    """Sink returning the body as text.

    The body is decoded with the response charset (UTF-8 when none is
    declared); bytes invalid in that charset become U+FFFD.
    """
    return body.decode(response.encoding or "utf-8", errors="replace")


class _BaseExecutor:
    """Request construction and status classification shared by both executors."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def _build_request(self, client, request: "BaseRequest", method: str,
                       content: Optional[str]) -> httpx.Request:
        try:
            return client.build_request(
                method,
                request.endpoint,
                headers=dict(request.headers),
                content=content,
            )
        except httpx.InvalidURL as e:
            self.logger.error(f"Cannot build {method} request for {request.endpoint!r}: {str(e)}")
            raise RequestBuildError(f"invalid endpoint {request.endpoint!r}: {str(e)}") from e
        except (UnicodeEncodeError, TypeError) as e:
            # Header names and values must be ASCII strings
            self.logger.error(f"Cannot build {method} request for {request.endpoint!r}: invalid headers: {str(e)}")
            raise RequestBuildError(f"invalid headers for {request.endpoint!r}: {str(e)}") from e

    def _transport_failure(self, method: str, request: "BaseRequest", error: httpx.RequestError) -> Exception:
        if isinstance(error, httpx.UnsupportedProtocol):
            self.logger.error(f"Cannot build {method} request for {request.endpoint!r}: {str(error)}")
            return RequestBuildError(f"invalid endpoint {request.endpoint!r}: {str(error)}")

        self.logger.error(f"Transport error for {method} {request.endpoint}: {str(error)}")
        return TransportError(str(error))

    def _check_status(self, method: str, request: "BaseRequest", response: httpx.Response) -> bool:
        """Classify the response status code.

        Returns True when a registered status handler consumed the response
        without an error, False when the body should be processed. Raises
        the handler's error or a StatusError otherwise.
        """
        status_code = response.status_code

        handler = request.status_handlers.get(status_code)
        if handler is not None:
            self.logger.debug(f"{method} {request.endpoint} returned {status_code}, invoking registered handler")
            error = handler()
            if error is None:
                return True
            if not isinstance(error, BaseException):
                raise TypeError(
                    f"status handler for {status_code} returned {type(error).__name__}, "
                    f"expected an exception or None"
                )
            raise error

        if status_code == NOT_IMPLEMENTED_STATUS_CODE:
            self.logger.warning(f"{method} {request.endpoint} is not implemented by the server")
            raise NotImplementedStatusError(status_code)

        if status_code != request.ok_status_code:
            self.logger.warning(
                f"{method} {request.endpoint} failed with status {status_code} "
                f"(expected {request.ok_status_code})"
            )
            raise UnexpectedStatusError(status_code)

        return False

    def _body_read_failure(self, method: str, request: "BaseRequest", error: Exception) -> BodyReadError:
        self.logger.error(f"Failed to read response body for {method} {request.endpoint}: {str(error)}")
        return BodyReadError(error)

    def _finish(self, method: str, request: "BaseRequest", body: bytes,
                response: httpx.Response, sink: ResultSink) -> Any:
        try:
            result = sink(body, response)
        except DecodeError as e:
            self.logger.error(f"Failed to decode response of {method} {request.endpoint}: {str(e.cause)}")
            raise

        self.logger.debug(f"{method} {request.endpoint} successful")
        return result


class RequestExecutor(_BaseExecutor):
    """Send requests through a synchronous ``httpx.Client``.

    Every call makes exactly one attempt; retries are left to the caller.
    """

    def execute(self, client: httpx.Client, request: "BaseRequest", method: str,
                content: Optional[str], sink: ResultSink) -> Any:
        """Send one request and turn its response into a result.

        Args:
            client: Client performing the network I/O
            request: Descriptor of the call
            method: HTTP method
            content: Request body, or None for no body
            sink: Callable producing the result from the body

        Returns:
            The sink's result, or None when a status handler returned None

        Raises:
            RequestBuildError: If the request cannot be constructed
            TransportError: If the request cannot be sent
            StatusError: If the status code is rejected
            BodyReadError: If the body cannot be read
            DecodeError: If the JSON sink cannot decode the body
        """
        http_request = self._build_request(client, request, method, content)

        self.logger.debug(f"Making {method} request to {request.endpoint}")
        try:
            response = client.send(http_request, stream=True)
        except httpx.RequestError as e:
            raise self._transport_failure(method, request, e) from e

        try:
            if self._check_status(method, request, response):
                return None

            try:
                body = response.read()
            except (httpx.StreamError, httpx.RequestError) as e:
                raise self._body_read_failure(method, request, e) from e

            return self._finish(method, request, body, response, sink)
        finally:
            response.close()

    def post_json(self, client: httpx.Client, request: "PostRequest", result_type: Any = Any) -> Any:
        """POST the request's payload and decode the JSON response."""
        return self.execute(client, request, METHOD_POST, request.payload, json_sink(result_type))

    def get_json(self, client: httpx.Client, request: "GetRequest", result_type: Any = Any) -> Any:
        """GET the endpoint and decode the JSON response."""
        return self.execute(client, request, METHOD_GET, None, json_sink(result_type))

    def get_plain(self, client: httpx.Client, request: "GetRequest") -> Optional[str]:
        """GET the endpoint and return the response body as text."""
        return self.execute(client, request, METHOD_GET, None, text_sink)


class AsyncRequestExecutor(_BaseExecutor):
    """Send requests through an ``httpx.AsyncClient``."""

    async def execute(self, client: httpx.AsyncClient, request: "BaseRequest", method: str,
                      content: Optional[str], sink: ResultSink) -> Any:
        """Async counterpart of ``RequestExecutor.execute``."""
        http_request = self._build_request(client, request, method, content)

        self.logger.debug(f"Making {method} request to {request.endpoint}")
        try:
            response = await client.send(http_request, stream=True)
        except httpx.RequestError as e:
            raise self._transport_failure(method, request, e) from e

        try:
            if self._check_status(method, request, response):
                return None

            try:
                body = await response.aread()
            except (httpx.StreamError, httpx.RequestError) as e:
                raise self._body_read_failure(method, request, e) from e

            return self._finish(method, request, body, response, sink)
        finally:
            await response.aclose()

    async def post_json(self, client: httpx.AsyncClient, request: "PostRequest", result_type: Any = Any) -> Any:
        """POST the request's payload and decode the JSON response."""
        return await self.execute(client, request, METHOD_POST, request.payload, json_sink(result_type))

    async def get_json(self, client: httpx.AsyncClient, request: "GetRequest", result_type: Any = Any) -> Any:
        """GET the endpoint and decode the JSON response."""
        return await self.execute(client, request, METHOD_GET, None, json_sink(result_type))

    async def get_plain(self, client: httpx.AsyncClient, request: "GetRequest") -> Optional[str]:
        """GET the endpoint and return the response body as text."""
        return await self.execute(client, request, METHOD_GET, None, text_sink)


default_executor = RequestExecutor()
default_async_executor = AsyncRequestExecutor()


def post_json(client: httpx.Client, request: "PostRequest", result_type: Any = Any) -> Any:
    return default_executor.post_json(client, request, result_type)


def get_json(client: httpx.Client, request: "GetRequest", result_type: Any = Any) -> Any:
    return default_executor.get_json(client, request, result_type)


def get_plain(client: httpx.Client, request: "GetRequest") -> Optional[str]:
    return default_executor.get_plain(client, request)


async def apost_json(client: httpx.AsyncClient, request: "PostRequest", result_type: Any = Any) -> Any:
    return await default_async_executor.post_json(client, request, result_type)


async def aget_json(client: httpx.AsyncClient, request: "GetRequest", result_type: Any = Any) -> Any:
    return await default_async_executor.get_json(client, request, result_type)


async def aget_plain(client: httpx.AsyncClient, request: "GetRequest") -> Optional[str]:
    return await default_async_executor.get_plain(client, request)
