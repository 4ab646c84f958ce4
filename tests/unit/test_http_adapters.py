from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.knowledge.duckduckgo_source import DuckDuckGoInstantAnswerSource
from src.adapters.knowledge.wikipedia_source import WikipediaSummarySource
from src.adapters.llm.chat_completion_providers import (
    OpenAiCompatibleProvider,
    providers_from_env,
)
from src.adapters.location.ip_location_providers import (
    GeolocationDbProvider,
    IpApiProvider,
    IpInfoProvider,
    _JsonLocationProvider,
)
from src.adapters.persistence import HttpFacilityRepository
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import GeoPoint

_RealAsyncClient = httpx.AsyncClient


def _serve(
    monkeypatch: pytest.MonkeyPatch, handler: Callable[[httpx.Request], httpx.Response]
) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def _client(*args, **kwargs) -> httpx.AsyncClient:
        kwargs["transport"] = httpx.MockTransport(_record)
        return _RealAsyncClient(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", _client)
    return seen


@pytest.mark.unit
@pytest.mark.anyio
async def test_nominatim_forward_and_reverse(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/search":
            return httpx.Response(200, json=[{"lat": "22.5839", "lon": "88.3424"}])
        return httpx.Response(200, json={"display_name": "Esplanade, Kolkata"})

    seen = _serve(monkeypatch, handler)
    geocoder = NominatimGeocoder(base_url="http://nominatim.test", user_agent="tests")

    assert await geocoder.forward("Howrah") == GeoPoint(lat=22.5839, lng=88.3424)
    assert await geocoder.reverse(GeoPoint(lat=22.57, lng=88.36)) == "Esplanade, Kolkata"
    assert seen[0].url.params["q"] == "Howrah"
    assert seen[1].url.params["lon"] == "88.36"
    assert seen[0].headers["User-Agent"] == "tests"


@pytest.mark.unit
@pytest.mark.anyio
async def test_nominatim_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(503))
    geocoder = NominatimGeocoder(base_url="http://nominatim.test")

    assert await geocoder.forward("Howrah") is None
    with pytest.raises(CollaboratorUnavailable):
        await geocoder.reverse(GeoPoint(lat=22.57, lng=88.36))


@pytest.mark.unit
@pytest.mark.anyio
async def test_nominatim_reverse_without_name_formats_point(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(200, json={"error": "none"}))
    geocoder = NominatimGeocoder(base_url="http://nominatim.test")

    assert await geocoder.reverse(GeoPoint(lat=1.0, lng=2.0)) == "1.000000, 2.000000"


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    ("provider", "payload", "expected"),
    [
        (IpApiProvider(), {"latitude": 22.5, "longitude": 88.3}, GeoPoint(lat=22.5, lng=88.3)),
        (GeolocationDbProvider(), {"latitude": 22.6, "longitude": 88.4}, GeoPoint(lat=22.6, lng=88.4)),
        (IpInfoProvider(), {"loc": "22.7,88.5"}, GeoPoint(lat=22.7, lng=88.5)),
    ],
    ids=["ipapi", "geolocation-db", "ipinfo"],
)
async def test_ip_location_providers_parse_payloads(
    monkeypatch: pytest.MonkeyPatch, provider, payload: dict, expected: GeoPoint
) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(200, json=payload))
    assert await provider.locate() == expected


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    ("provider", "payload"),
    [
        (IpApiProvider(), {"error": True}),
        (GeolocationDbProvider(), {"latitude": "Not found", "longitude": "Not found"}),
        (IpInfoProvider(), {"loc": "bogus"}),
    ],
    ids=["ipapi", "geolocation-db", "ipinfo"],
)
async def test_ip_location_providers_reject_missing_coordinates(
    monkeypatch: pytest.MonkeyPatch, provider, payload: dict
) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(200, json=payload))
    with pytest.raises(CollaboratorUnavailable):
        await provider.locate()


@pytest.mark.unit
def test_location_provider_base_requires_a_parser() -> None:
    with pytest.raises(TypeError):
        _JsonLocationProvider(name="bare", url="https://example.invalid/")


@pytest.mark.unit
@pytest.mark.anyio
async def test_chat_completion_provider_posts_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _serve(
        monkeypatch,
        lambda request: httpx.Response(
            200, json={"choices": [{"message": {"content": "See a doctor."}}]}
        ),
    )
    provider = OpenAiCompatibleProvider(
        name="openai", url="http://llm.test/v1/chat/completions", model="m", api_key="k"
    )

    assert await provider.complete("chest pain") == "See a doctor."

    body = json.loads(seen[0].content)
    assert seen[0].headers["Authorization"] == "Bearer k"
    assert body["model"] == "m"
    assert body["temperature"] == 0.5
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert body["messages"][1]["content"] == "chest pain"


@pytest.mark.unit
@pytest.mark.anyio
async def test_chat_completion_provider_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = OpenAiCompatibleProvider(
        name="openai", url="http://llm.test/v1/chat/completions", model="m", api_key="k"
    )

    _serve(monkeypatch, lambda request: httpx.Response(200, json={"choices": []}))
    assert await provider.complete("q") == "No response"

    _serve(monkeypatch, lambda request: httpx.Response(401, json={"error": "bad key"}))
    with pytest.raises(CollaboratorUnavailable):
        await provider.complete("q")


@pytest.mark.unit
def test_providers_from_env_orders_openai_first(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    assert providers_from_env() == ()

    monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")
    monkeypatch.setenv("OPENAI_API_KEY", "oa-key")
    names = [p.name for p in providers_from_env()]
    assert names == ["openai", "openrouter"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_duckduckgo_abstract(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(
        monkeypatch,
        lambda request: httpx.Response(
            200,
            json={
                "Heading": "Dengue",
                "AbstractText": "Dengue is a mosquito-borne disease.",
                "AbstractSource": "Wikipedia",
                "AbstractURL": "https://en.wikipedia.org/wiki/Dengue",
            },
        ),
    )

    answer = await DuckDuckGoInstantAnswerSource().lookup("dengue")

    assert answer is not None
    assert answer.title == "Dengue"
    assert answer.source == "Wikipedia"


@pytest.mark.unit
@pytest.mark.anyio
async def test_duckduckgo_without_abstract(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(200, json={"AbstractText": ""}))
    assert await DuckDuckGoInstantAnswerSource().lookup("xyz") is None


@pytest.mark.unit
@pytest.mark.anyio
async def test_wikipedia_search_then_summary(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/w/api.php":
            return httpx.Response(200, json={"query": {"search": [{"title": "Heat stroke"}]}})
        return httpx.Response(
            200,
            json={
                "title": "Heat stroke",
                "extract": "Heat stroke is a severe heat illness.",
                "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Heat_stroke"}},
            },
        )

    seen = _serve(monkeypatch, handler)

    answer = await WikipediaSummarySource(base_url="http://wiki.test").lookup("heat stroke")

    assert answer is not None
    assert answer.text.startswith("Heat stroke is")
    assert answer.url == "https://en.wikipedia.org/wiki/Heat_stroke"
    assert seen[1].url.raw_path == b"/api/rest_v1/page/summary/Heat%20stroke"


@pytest.mark.unit
@pytest.mark.anyio
async def test_wikipedia_no_hits(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, lambda request: httpx.Response(200, json={"query": {"search": []}}))
    assert await WikipediaSummarySource(base_url="http://wiki.test").lookup("zzz") is None


@pytest.mark.unit
@pytest.mark.anyio
async def test_http_facility_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(
        monkeypatch,
        lambda request: httpx.Response(
            200, json=[{"name": "A", "type": "Clinic", "area": "X", "lat": 22.5, "lng": 88.3}]
        ),
    )
    facilities = await HttpFacilityRepository(url="http://site.test/f.json").load_facilities()
    assert [f.name for f in facilities] == ["A"]

    _serve(monkeypatch, lambda request: httpx.Response(404))
    with pytest.raises(CollaboratorUnavailable):
        await HttpFacilityRepository(url="http://site.test/f.json").load_facilities()
