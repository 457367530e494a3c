"""Errors raised by the threads client."""

from __future__ import annotations


class ThreadsClientError(Exception):
    """Base class for every error raised by this package."""


class ApiError(ThreadsClientError):
    """The remote service answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
        error_type: str | None = None,
        param: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.error_type = error_type
        self.param = param

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} ({self.status_code}, {self.code})"
        return f"{self.message} ({self.status_code})"


class SchemaError(ThreadsClientError):
    """A response body did not match the expected structure."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class TransportError(ThreadsClientError):
    """Network-level failure while talking to the remote service."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
