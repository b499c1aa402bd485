"""Client configuration.

Settings can be passed explicitly or read from ``HOLIDAYAPI_*`` environment
variables:

    HOLIDAYAPI_KEY          API key (required)
    HOLIDAYAPI_VERSION      API version, defaults to 1
    HOLIDAYAPI_HOST         service host, defaults to holidayapi.com
    HOLIDAYAPI_TIMEOUT      request timeout in seconds
    HOLIDAYAPI_LOG_LEVEL    debug, info, warn or error
    HOLIDAYAPI_LOG_FORMAT   kv or json
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .util.log import Log, LogFormat, LogLevel
from .validation import DEFAULT_VERSION

ENV_PREFIX = "HOLIDAYAPI_"
DEFAULT_HOST = "holidayapi.com"
DEFAULT_TIMEOUT = 30.0


class ConfigError(Exception):
    """Configuration error."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Config error in {source}: {message}")


class ClientConfig(BaseModel):
    """Settings used to build a ``HolidayAPI`` client."""

    key: str
    version: int = int(DEFAULT_VERSION)
    host: str = Field(DEFAULT_HOST, min_length=1)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    log_level: Optional[str] = None
    log_format: Optional[Literal["kv", "json"]] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            LogLevel.parse(value)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Read settings from ``HOLIDAYAPI_*`` variables."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{field.upper()}")
            if raw is not None and raw.strip():
                values[field] = raw.strip()

        if "key" not in values:
            raise ConfigError("environment", f"{ENV_PREFIX}KEY is not set")
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError("environment", str(e)) from e


def configure_logging(config: ClientConfig) -> None:
    """Apply the log settings of ``config``, leaving unset values untouched."""
    if config.log_level is None and config.log_format is None:
        return
    Log.configure(
        level=LogLevel.parse(config.log_level) if config.log_level else None,
        format=LogFormat.parse(config.log_format) if config.log_format else None,
        console=True,
    )
