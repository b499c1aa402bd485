"""Exceptions raised by the Holiday API client."""

from __future__ import annotations

from collections.abc import Iterable


class HolidayAPIError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyFormatError(HolidayAPIError):
    """Raised when a key does not look like a Holiday API key."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Invalid key: {key}")


class InvalidVersionError(HolidayAPIError):
    """Raised when the requested API version is not supported."""

    def __init__(self, version: object, supported: Iterable[int]) -> None:
        self.version = version
        self.supported = sorted(int(item) for item in supported)
        super().__init__(f"Invalid version: {version}, please choose: {self.supported}")


class RequestError(HolidayAPIError):
    """Raised when a request fails in transport or with a non-success status.

    ``status_code`` is None when no response was received. The transport
    exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, status_code: int | None, message: str, url: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        status = self.status_code if self.status_code is not None else "request failed"
        text = f"{status}: {self.message}"
        if self.url:
            text += f"\nRaw url: '{self.url}'"
        return text


class InvalidOrExpiredKeyError(RequestError):
    """Raised when the service rejects a well-formed key."""


class DecodeError(HolidayAPIError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, status_code: int, message: str, url: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"{status_code}: {message}")
