"""Tests for the Maps providers: dispatch, retries, status handling and the factory."""
import os

import httpx
import pytest

from core.errors import MapsApiError, NotValidatedError, RetriesExhaustedError
from directions.response import DirectionsResponse
from distance_matrix.request import DistanceMatrixRequest
from distance_matrix.response import DistanceMatrixResponse
from models.location import Address, LatLng
from models.status import Status
from models.travel import TravelMode
from places.field import Field
from places.request import PlaceDetailsRequest
from places.response import PlaceDetailsResponse
from providers.factory import get_provider
from providers.mock.maps_provider import MockMapsProvider
from providers.real.google_maps import GoogleMapsProvider
from roads.request import SnapToRoadsRequest
from roads.response import SnapToRoadsResponse

DIRECTIONS_OK = {
    "status": "OK",
    "geocoded_waypoints": [],
    "routes": [
        {
            "summary": "I-95 N",
            "legs": [
                {
                    "distance": {"text": "346 km", "value": 346185},
                    "duration": {"text": "3 hours 52 mins", "value": 13920},
                    "start_location": {"lat": 40.71, "lng": -74.0},
                    "end_location": {"lat": 42.36, "lng": -71.05},
                }
            ],
        }
    ],
}


def _provider(handler, **kwargs) -> GoogleMapsProvider:
    return GoogleMapsProvider(
        api_key="test-key",
        maps_base_url="https://maps.example.test/maps/api",
        roads_base_url="https://roads.example.test/v1",
        retry_base_delay=0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# ── BaseMapsProvider.send ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_send_requires_validation(new_york_to_boston, mock_provider):
    with pytest.raises(NotValidatedError):
        await mock_provider.send(new_york_to_boston)
    assert mock_provider.requested_urls == []


@pytest.mark.asyncio
async def test_execute_validates_then_sends(new_york_to_boston, mock_provider):
    response = await new_york_to_boston.with_travel_mode(TravelMode.DRIVING).execute(mock_provider)
    assert isinstance(response, DirectionsResponse)
    assert new_york_to_boston.validated
    assert response.status is Status.OK
    assert response.routes[0].legs[0].end_address == "Boston, MA, USA"


@pytest.mark.asyncio
async def test_mock_provider_appends_key_after_query(new_york_to_boston, mock_provider):
    await new_york_to_boston.execute(mock_provider)
    url = mock_provider.requested_urls[0]
    assert url == (
        "https://maps.googleapis.com/maps/api/directions/json"
        "?destination=Boston&origin=New+York&key=mock-key"
    )


@pytest.mark.asyncio
async def test_api_key_is_query_encoded(new_york_to_boston):
    provider = MockMapsProvider(api_key="a b&c")
    await new_york_to_boston.execute(provider)
    assert provider.requested_urls[0].endswith("&key=a+b%26c")


@pytest.mark.asyncio
async def test_mock_provider_answers_every_family(mock_provider):
    matrix = await DistanceMatrixRequest([Address("New York")], [Address("Boston")]).execute(mock_provider)
    assert isinstance(matrix, DistanceMatrixResponse)
    assert matrix.element(0, 1).distance.value == 151128

    details = await PlaceDetailsRequest("ChIJN1t_tDeuEmsRUsoyG83frY4").with_field(Field.NAME).execute(mock_provider)
    assert isinstance(details, PlaceDetailsResponse)
    assert details.result.name == "Google Sydney"

    snapped = await SnapToRoadsRequest([LatLng(60.170880, 24.942795)]).execute(mock_provider)
    assert isinstance(snapped, SnapToRoadsResponse)
    assert snapped.snapped_points[1].original_index == 1
    assert mock_provider.requested_urls[-1].startswith("https://roads.googleapis.com/v1/snapToRoads?path=")


# ── GoogleMapsProvider ────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_google_provider_sends_canonical_query_with_key(new_york_to_boston):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json=DIRECTIONS_OK)

    response = await new_york_to_boston.execute(_provider(handler))
    assert response.routes[0].summary == "I-95 N"
    assert seen[0].path == "/maps/api/directions/json"
    assert seen[0].params["origin"] == "New York"
    assert seen[0].params["key"] == "test-key"


@pytest.mark.asyncio
async def test_google_provider_retries_on_429(new_york_to_boston):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(429, headers={"retry-after": "0"})
        return httpx.Response(200, json=DIRECTIONS_OK)

    response = await new_york_to_boston.execute(_provider(handler, max_retries=3))
    assert response.status is Status.OK
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_google_provider_retries_on_server_error_then_gives_up(new_york_to_boston):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await new_york_to_boston.execute(_provider(handler, max_retries=2))
    assert len(calls) == 3
    assert exc_info.value.attempts == 3
    assert exc_info.value.family == "directions"


@pytest.mark.asyncio
async def test_google_provider_raises_for_non_success_status(new_york_to_boston):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={
            "status": "REQUEST_DENIED",
            "error_message": "The provided API key is invalid.",
            "routes": [],
        })

    with pytest.raises(MapsApiError) as exc_info:
        await new_york_to_boston.execute(_provider(handler))
    assert exc_info.value.status == "REQUEST_DENIED"
    assert "API key is invalid" in str(exc_info.value)


@pytest.mark.asyncio
async def test_zero_results_is_not_an_error(new_york_to_boston):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={
            "status": "ZERO_RESULTS",
            "routes": [],
            "available_travel_modes": ["DRIVING"],
        })

    response = await new_york_to_boston.execute(_provider(handler))
    assert response.status is Status.ZERO_RESULTS
    assert response.available_travel_modes == ["DRIVING"]


@pytest.mark.asyncio
async def test_roads_error_body_becomes_maps_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "roads.example.test"
        return httpx.Response(400, json={
            "error": {"code": 400, "message": "Invalid path.", "status": "INVALID_ARGUMENT"}
        })

    with pytest.raises(MapsApiError) as exc_info:
        await SnapToRoadsRequest([LatLng(1, 2)]).execute(_provider(handler))
    assert exc_info.value.status == "INVALID_ARGUMENT"
    assert exc_info.value.error_message == "Invalid path."


@pytest.mark.asyncio
async def test_non_json_success_body_becomes_maps_api_error(new_york_to_boston):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(MapsApiError) as exc_info:
        await new_york_to_boston.execute(_provider(handler))
    assert exc_info.value.status == "INVALID_RESPONSE"
    assert "directions" in exc_info.value.error_message


@pytest.mark.asyncio
async def test_other_client_errors_raise_http_status_error(new_york_to_boston):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="not found")

    with pytest.raises(httpx.HTTPStatusError):
        await new_york_to_boston.execute(_provider(handler))


# ── Provider factory ──────────────────────────────────────────────────────────

def test_factory_returns_mock_by_default():
    old = os.environ.pop("USE_REAL_APIS", None)
    try:
        assert isinstance(get_provider(), MockMapsProvider)
    finally:
        if old is not None:
            os.environ["USE_REAL_APIS"] = old


def test_factory_returns_google_provider_when_enabled(monkeypatch):
    monkeypatch.setenv("USE_REAL_APIS", "true")
    assert isinstance(get_provider(), GoogleMapsProvider)
