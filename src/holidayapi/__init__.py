"""Async client for the Holiday API (https://holidayapi.com)."""

from .client import HolidayAPI
from .config import ClientConfig, ConfigError
from .errors import (
    DecodeError,
    HolidayAPIError,
    InvalidKeyFormatError,
    InvalidOrExpiredKeyError,
    InvalidVersionError,
    RequestError,
)
from .request import (
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    Request,
    WorkdayRequest,
    WorkdaysRequest,
)
from .response import (
    CountriesResponse,
    HolidaysResponse,
    LanguagesResponse,
    WorkdayResponse,
    WorkdaysResponse,
)
from .validation import ApiVersion, SUPPORTED_VERSIONS, validate_key, validate_version

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ApiVersion",
    "ClientConfig",
    "ConfigError",
    "CountriesRequest",
    "CountriesResponse",
    "DecodeError",
    "HolidayAPI",
    "HolidayAPIError",
    "HolidaysRequest",
    "HolidaysResponse",
    "InvalidKeyFormatError",
    "InvalidOrExpiredKeyError",
    "InvalidVersionError",
    "LanguagesRequest",
    "LanguagesResponse",
    "Request",
    "RequestError",
    "SUPPORTED_VERSIONS",
    "WorkdayRequest",
    "WorkdayResponse",
    "WorkdaysRequest",
    "WorkdaysResponse",
    "validate_key",
    "validate_version",
]
