"""The ``HolidayAPI`` client: credential checks, endpoint builders and the
shared GET path every request goes through.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .config import ClientConfig, DEFAULT_HOST, DEFAULT_TIMEOUT, configure_logging
from .errors import DecodeError, InvalidOrExpiredKeyError, RequestError
from .request import (
    CountriesRequest,
    DateLike,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
    WorkdaysRequest,
)
from .response import public_url
from .util.log import Log
from .validation import DEFAULT_VERSION, validate_key, validate_version

log = Log.create({"service": "holidayapi.client"})


class HolidayAPI:
    """Async client for the Holiday API.

    The key and version are checked before anything else happens, so an
    invalid client never touches the network:

        async with HolidayAPI("00000000-0000-0000-0000-000000000000") as api:
            response = await api.holidays("us", 2021).month(10).upcoming().get()

    One instance can be shared by concurrent tasks; each builder belongs to
    the task that created it.
    """

    def __init__(
        self,
        key: str,
        version: int = DEFAULT_VERSION,
        *,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        validate_key(key)
        validate_version(version)

        self._key = key
        self._version = int(version)
        self._base_url = f"https://{host}/v{self._version}/"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    @classmethod
    def with_version(cls, key: str, version: int, **kwargs: Any) -> "HolidayAPI":
        """Build a client for an explicit API version."""
        return cls(key, version, **kwargs)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "HolidayAPI":
        """Build a client from ``config``, then apply its log settings."""
        kwargs.setdefault("host", config.host)
        kwargs.setdefault("timeout", config.timeout)
        api = cls(config.key, config.version, **kwargs)
        configure_logging(config)
        return api

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> "HolidayAPI":
        """Build a client from ``HOLIDAYAPI_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env(environ), **kwargs)

    @property
    def key(self) -> str:
        return self._key

    @property
    def version(self) -> int:
        return self._version

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"HolidayAPI(base_url={self._base_url!r})"

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HolidayAPI":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def countries(self) -> CountriesRequest:
        """Start a ``countries`` request.

            api.countries().search("united states").public()
        """
        return CountriesRequest(self)

    def holidays(self, country: str, year: int) -> HolidaysRequest:
        """Start a ``holidays`` request.

            api.holidays("us", 2020).month(12).upcoming()
        """
        return HolidaysRequest(self, country, year)

    def workday(self, country: str, start: DateLike, days: int) -> WorkdayRequest:
        return WorkdayRequest(self, country, start, days)

    def workdays(self, country: str, start: DateLike, end: DateLike) -> WorkdaysRequest:
        return WorkdaysRequest(self, country, start, end)

    def languages(self) -> LanguagesRequest:
        return LanguagesRequest(self)

    async def custom_request(
        self,
        endpoint: str,
        parameters: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """GET an endpoint that has no builder and return the raw response.

        The endpoint name is lowercased. The client always sends its own key,
        so a ``key`` entry in ``parameters`` is dropped. 4xx and 5xx statuses
        raise the same errors as the builders.
        """
        return await self._execute(endpoint.lower(), dict(parameters or {}))

    def _url(self, endpoint: str) -> str:
        return self._base_url + endpoint.lstrip("/")

    async def _execute(self, endpoint: str, parameters: Mapping[str, str]) -> httpx.Response:
        params: dict[str, str] = {"key": self._key}
        params.update((name, value) for name, value in parameters.items() if name != "key")

        url = self._url(endpoint)
        timer = log.time("request", {"endpoint": endpoint})
        try:
            response = await self._client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            timer.stop(error=type(e).__name__)
            raise RequestError(None, str(e) or type(e).__name__, url) from e

        timer.stop(status=response.status_code)
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_error:
            return

        url = public_url(response.request.url)
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(response.status_code, "error response is not JSON", url) from e

        message = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(message, str):
            raise DecodeError(response.status_code, "error response has no 'error' field", url)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise InvalidOrExpiredKeyError(response.status_code, message, url)
        raise RequestError(response.status_code, message, url)
