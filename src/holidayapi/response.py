"""Pydantic models for Holiday API response bodies."""

from __future__ import annotations

import datetime as dt
from typing import TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class RequestQuota(ResponseModel):
    """Usage counters the service attaches to every response."""

    used: int
    available: int
    resets: str


class Weekday(ResponseModel):
    name: str
    numeric: int


class CountryCodes(ResponseModel):
    alpha_2: str = Field(alias="alpha-2")
    alpha_3: str = Field(alias="alpha-3")
    numeric: str


class Currency(ResponseModel):
    alpha: str


class Subdivision(ResponseModel):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)


class Country(ResponseModel):
    code: str
    name: str
    codes: CountryCodes
    languages: list[str] = Field(default_factory=list)
    currencies: list[Currency] = Field(default_factory=list)
    flag: str | None = None
    subdivisions: list[Subdivision] = Field(default_factory=list)
    weekend: list[Weekday] = Field(default_factory=list)


class HolidayWeekdays(ResponseModel):
    date: Weekday
    observed: Weekday


class Holiday(ResponseModel):
    name: str
    date: dt.date
    observed: dt.date
    public: bool
    country: str
    uuid: str
    weekday: HolidayWeekdays
    subdivisions: list[str] = Field(default_factory=list)


class Workday(ResponseModel):
    date: dt.date
    weekday: Weekday


class Language(ResponseModel):
    code: str
    name: str


class APIResponse(ResponseModel):
    """Envelope shared by every endpoint."""

    status: int
    requests: RequestQuota
    warning: str | None = None


class CountriesResponse(APIResponse):
    countries: list[Country]


class HolidaysResponse(APIResponse):
    holidays: list[Holiday]


class WorkdayResponse(APIResponse):
    workday: Workday


class WorkdaysResponse(APIResponse):
    workdays: int


class LanguagesResponse(APIResponse):
    languages: list[Language]


ResponseT = TypeVar("ResponseT", bound=APIResponse)


def public_url(url: httpx.URL) -> str:
    """Render ``url`` without the API key."""
    return str(url.copy_remove_param("key"))


def decode_response(model: type[ResponseT], response: httpx.Response) -> ResponseT:
    """Decode a successful response body into ``model``.

    Raises DecodeError when the body is not JSON or does not match the schema.
    """
    url = public_url(response.request.url)
    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(response.status_code, "response body is not JSON", url) from exc

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            response.status_code,
            f"unexpected {model.__name__} body: {exc.error_count()} validation error(s)",
            url,
        ) from exc
