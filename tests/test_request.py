import asyncio
import datetime as dt
from collections.abc import AsyncIterator

import httpx
import pytest

from holidayapi import HolidayAPI, HolidaysResponse
from tests.helpers import (
    KEY,
    countries_body,
    failing_transport,
    holidays_body,
    languages_body,
    recording_api,
    workday_body,
    workdays_body,
)


@pytest.fixture
async def api() -> AsyncIterator[HolidayAPI]:
    async with HolidayAPI(KEY, transport=failing_transport()) as client:
        yield client


@pytest.mark.anyio
async def test_factories_seed_required_parameters(api: HolidayAPI) -> None:
    assert api.countries().params() == {}
    assert api.languages().params() == {}
    assert api.holidays("us", 2020).params() == {"country": "us", "year": "2020"}
    assert api.workday("us", "2021-07-01", 15).params() == {
        "country": "us",
        "start": "2021-07-01",
        "days": "15",
    }
    assert api.workdays("gb", dt.date(2021, 1, 1), dt.date(2021, 1, 31)).params() == {
        "country": "gb",
        "start": "2021-01-01",
        "end": "2021-01-31",
    }


@pytest.mark.anyio
async def test_setters_chain_and_last_write_wins(api: HolidayAPI) -> None:
    request = api.holidays("us", 2020).month(12).upcoming().month(10)

    assert request.params() == {
        "country": "us",
        "year": "2020",
        "month": "10",
        "upcoming": "true",
    }
    assert request.country == "us"
    assert request.year == 2020


@pytest.mark.anyio
async def test_values_are_not_validated_locally(api: HolidayAPI) -> None:
    request = api.holidays("us", 2020).month(13).day(42)
    assert request.params()["month"] == "13"
    assert request.params()["day"] == "42"


@pytest.mark.anyio
async def test_holidays_optional_parameters(api: HolidayAPI) -> None:
    request = (
        api
        .holidays("de", 2021)
        .public()
        .subdivisions()
        .search("christmas")
        .language("fr")
        .previous()
        .day(24)
    )

    assert request.params() == {
        "country": "de",
        "year": "2021",
        "public": "true",
        "subdivisions": "true",
        "search": "christmas",
        "language": "fr",
        "previous": "true",
        "day": "24",
    }


@pytest.mark.anyio
async def test_countries_and_languages_optional_parameters(api: HolidayAPI) -> None:
    assert api.countries().country("us").public().params() == {"country": "us", "public": "true"}
    assert api.languages().language("es").search("span").params() == {
        "language": "es",
        "search": "span",
    }


@pytest.mark.anyio
async def test_builders_do_not_share_parameters(api: HolidayAPI) -> None:
    first = api.holidays("us", 2020).month(1)
    second = api.holidays("ca", 2021)

    assert "month" not in second.params()
    assert first.params()["country"] == "us"


@pytest.mark.anyio
async def test_holidays_get_sends_query_and_decodes() -> None:
    calls: list[httpx.Request] = []
    api = recording_api(lambda request: httpx.Response(200, json=holidays_body()), calls)

    response = await api.holidays("us", 2020).month(12).upcoming().month(10).get()
    await api.aclose()

    assert isinstance(response, HolidaysResponse)
    assert response.holidays[0].name == "Christmas Day"
    assert len(calls) == 1
    url = calls[0].url
    assert url.path == "/v1/holidays"
    assert url.params["key"] == KEY
    assert url.params["country"] == "us"
    assert url.params["year"] == "2020"
    assert url.params.get_list("month") == ["10"]
    assert url.params["upcoming"] == "true"


@pytest.mark.anyio
async def test_countries_search_is_url_encoded() -> None:
    calls: list[httpx.Request] = []
    api = recording_api(lambda request: httpx.Response(200, json=countries_body()), calls)

    response = await api.countries().search("united states").public().get()
    await api.aclose()

    assert response.countries[0].codes.alpha_3 == "USA"
    assert len(calls) == 1
    url = calls[0].url
    assert url.path == "/v1/countries"
    assert b"search=united+states" in url.query
    assert url.params["search"] == "united states"
    assert url.params["public"] == "true"


@pytest.mark.anyio
async def test_workday_workdays_and_languages_get() -> None:
    bodies = {
        "/v1/workday": workday_body(),
        "/v1/workdays": workdays_body(),
        "/v1/languages": languages_body(),
    }
    calls: list[httpx.Request] = []
    api = recording_api(lambda request: httpx.Response(200, json=bodies[request.url.path]), calls)

    workday = await api.workday("us", dt.date(2021, 7, 1), 15).get()
    workdays = await api.workdays("us", "2021-01-01", "2021-01-31").get()
    languages = await api.languages().search("en").get()
    await api.aclose()

    assert workday.workday.date == dt.date(2021, 7, 22)
    assert workdays.workdays == 20
    assert [language.code for language in languages.languages] == ["en", "es"]
    assert [request.url.path for request in calls] == ["/v1/workday", "/v1/workdays", "/v1/languages"]
    assert calls[0].url.params["start"] == "2021-07-01"
    assert calls[0].url.params["days"] == "15"
    assert calls[1].url.params["end"] == "2021-01-31"


@pytest.mark.anyio
async def test_concurrent_builders_sharing_a_client_do_not_interfere() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        body = holidays_body()
        body["holidays"][0]["country"] = request.url.params["country"].upper()
        return httpx.Response(200, json=body)

    calls: list[httpx.Request] = []
    api = recording_api(handler, calls)

    us, ca = await asyncio.gather(
        api.holidays("us", 2020).month(12).get(),
        api.holidays("ca", 2021).public().get(),
    )
    await api.aclose()

    assert us.holidays[0].country == "US"
    assert ca.holidays[0].country == "CA"
    sent = {request.url.params["country"]: dict(request.url.params) for request in calls}
    assert sent["us"]["month"] == "12" and "public" not in sent["us"]
    assert sent["ca"]["public"] == "true" and "month" not in sent["ca"]
    assert sent["ca"]["year"] == "2021"
