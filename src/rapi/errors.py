"""Exceptions raised by the request executors."""

from typing import Optional


class RapiError(Exception):
    """Base exception for rapi errors."""
    pass


class RequestBuildError(RapiError):
    """Exception raised when the outgoing request cannot be constructed."""
    pass


class TransportError(RapiError):
    """Exception raised when the client fails to send the request."""
    pass


class StatusError(RapiError):
    """Base exception for responses rejected because of their status code."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotImplementedStatusError(StatusError):
    """Exception raised when the server answers 501 Not Implemented."""

    def __init__(self, status_code: int = 501):
        super().__init__("not implemented", status_code)


class UnexpectedStatusError(StatusError):
    """Exception raised when the status code is not the expected success code."""

    def __init__(self, status_code: int):
        super().__init__(f"status code {status_code}", status_code)


class BodyReadError(RapiError):
    """Exception raised when the response body cannot be read."""

    def __init__(self, cause: BaseException):
        super().__init__(f"failed to read response body: {cause}")
        self.cause = cause


class DecodeError(RapiError):
    """Exception raised when the response body is not valid JSON for the requested type."""

    def __init__(self, cause: BaseException):
        super().__init__(f"failed to unmarshal JSON: {cause}")
        self.cause = cause
