"""Shared test helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from holidayapi import HolidayAPI

KEY = "daaaaaab-aaaa-aaaa-aaaa-2aaaada37e14"

QUOTA = {"used": 3, "available": 9997, "resets": "2021-11-01 00:00:00"}


def countries_body() -> dict[str, Any]:
    return {
        "status": 200,
        "requests": QUOTA,
        "countries": [
            {
                "code": "US",
                "name": "United States",
                "codes": {"alpha-2": "US", "alpha-3": "USA", "numeric": "840"},
                "languages": ["en"],
                "currencies": [{"alpha": "USD"}],
                "flag": "https://flagsapi.com/US/flat/64.png",
                "subdivisions": [{"code": "US-AL", "name": "Alabama", "languages": ["en"]}],
                "weekend": [
                    {"name": "Saturday", "numeric": 6},
                    {"name": "Sunday", "numeric": 7},
                ],
            }
        ],
    }


def holidays_body() -> dict[str, Any]:
    return {
        "status": 200,
        "warning": "These results do not include state and province holidays.",
        "requests": QUOTA,
        "holidays": [
            {
                "name": "Christmas Day",
                "date": "2020-12-25",
                "observed": "2020-12-25",
                "public": True,
                "country": "US",
                "uuid": "2a8b0dd5-3e6b-4bd5-a1b1-3b5cd4a2e39e",
                "weekday": {
                    "date": {"name": "Friday", "numeric": "5"},
                    "observed": {"name": "Friday", "numeric": "5"},
                },
            }
        ],
    }


def workday_body() -> dict[str, Any]:
    return {
        "status": 200,
        "requests": QUOTA,
        "workday": {"date": "2021-07-22", "weekday": {"name": "Thursday", "numeric": "4"}},
    }


def workdays_body() -> dict[str, Any]:
    return {"status": 200, "requests": QUOTA, "workdays": 20}


def languages_body() -> dict[str, Any]:
    return {
        "status": 200,
        "requests": QUOTA,
        "languages": [{"code": "en", "name": "English"}, {"code": "es", "name": "Spanish"}],
    }


def recording_api(
    handler: Callable[[httpx.Request], httpx.Response],
    calls: list[httpx.Request],
    **kwargs: Any,
) -> HolidayAPI:
    """Client whose transport records every request before answering it."""

    def record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return HolidayAPI(KEY, transport=httpx.MockTransport(record), **kwargs)


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    return httpx.MockTransport(handler)
