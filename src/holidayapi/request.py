"""Request builders, one per Holiday API endpoint.

Builders are created by ``HolidayAPI`` factory methods. Setters mutate the
builder and return it so calls can be chained; ``get()`` sends the request.

    response = await api.holidays("us", 2021).month(10).day(20).public().get()
"""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, ClassVar, Generic

from .response import (
    CountriesResponse,
    HolidaysResponse,
    LanguagesResponse,
    ResponseT,
    WorkdayResponse,
    WorkdaysResponse,
    decode_response,
)

if TYPE_CHECKING:
    from .client import HolidayAPI

DateLike = str | dt.date


def _date_param(value: DateLike) -> str:
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


class Request(Generic[ResponseT]):
    """Accumulates query parameters for one endpoint."""

    endpoint: ClassVar[str]
    response_model: ClassVar[type]

    def __init__(self, api: HolidayAPI) -> None:
        self._api = api
        self._optional: dict[str, str] = {}

    def _required(self) -> dict[str, str]:
        return {}

    def _set(self, name: str, value: object) -> "Request[ResponseT]":
        self._optional[name] = str(value)
        return self

    def _flag(self, name: str) -> "Request[ResponseT]":
        self._optional[name] = "true"
        return self

    def params(self) -> dict[str, str]:
        """Query parameters that ``get()`` will send, excluding the key."""
        return {**self._optional, **self._required()}

    async def get(self) -> ResponseT:
        """Send the request and decode the response body."""
        response = await self._api._execute(self.endpoint, self.params())
        return decode_response(self.response_model, response)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params()!r})"


class CountriesRequest(Request[CountriesResponse]):
    endpoint = "countries"
    response_model = CountriesResponse

    def country(self, code: str) -> "CountriesRequest":
        """Limit the result to one country code."""
        self._set("country", code)
        return self

    def search(self, text: str) -> "CountriesRequest":
        self._set("search", text)
        return self

    def public(self) -> "CountriesRequest":
        """Only return public holidays information."""
        self._flag("public")
        return self


class HolidaysRequest(Request[HolidaysResponse]):
    endpoint = "holidays"
    response_model = HolidaysResponse

    def __init__(self, api: HolidayAPI, country: str, year: int) -> None:
        super().__init__(api)
        self._country = country
        self._year = year

    @property
    def country(self) -> str:
        return self._country

    @property
    def year(self) -> int:
        return self._year

    def _required(self) -> dict[str, str]:
        return {"country": self._country, "year": str(self._year)}

    def month(self, month: int) -> "HolidaysRequest":
        self._set("month", month)
        return self

    def day(self, day: int) -> "HolidaysRequest":
        self._set("day", day)
        return self

    def public(self) -> "HolidaysRequest":
        """Only return public holidays."""
        self._flag("public")
        return self

    def subdivisions(self) -> "HolidaysRequest":
        """Include holidays of the country's subdivisions."""
        self._flag("subdivisions")
        return self

    def search(self, text: str) -> "HolidaysRequest":
        self._set("search", text)
        return self

    def language(self, code: str) -> "HolidaysRequest":
        """Translate holiday names into the given language code."""
        self._set("language", code)
        return self

    def previous(self) -> "HolidaysRequest":
        """Return the holidays before the given date."""
        self._flag("previous")
        return self

    def upcoming(self) -> "HolidaysRequest":
        """Return the holidays after the given date."""
        self._flag("upcoming")
        return self


class WorkdayRequest(Request[WorkdayResponse]):
    """Finds the workday ``days`` working days after ``start``."""

    endpoint = "workday"
    response_model = WorkdayResponse

    def __init__(self, api: HolidayAPI, country: str, start: DateLike, days: int) -> None:
        super().__init__(api)
        self._country = country
        self._start = _date_param(start)
        self._days = days

    def _required(self) -> dict[str, str]:
        return {"country": self._country, "start": self._start, "days": str(self._days)}


class WorkdaysRequest(Request[WorkdaysResponse]):
    """Counts the workdays between ``start`` and ``end``."""

    endpoint = "workdays"
    response_model = WorkdaysResponse

    def __init__(self, api: HolidayAPI, country: str, start: DateLike, end: DateLike) -> None:
        super().__init__(api)
        self._country = country
        self._start = _date_param(start)
        self._end = _date_param(end)

    def _required(self) -> dict[str, str]:
        return {"country": self._country, "start": self._start, "end": self._end}


class LanguagesRequest(Request[LanguagesResponse]):
    endpoint = "languages"
    response_model = LanguagesResponse

    def language(self, code: str) -> "LanguagesRequest":
        self._set("language", code)
        return self

    def search(self, text: str) -> "LanguagesRequest":
        self._set("search", text)
        return self
