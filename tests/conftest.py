# ABOUTME: Shared test fixtures for the forecasttools test suite.
# ABOUTME: Provides a representative API payload and httpx MockTransport-backed capabilities.

import json

import httpx
import pytest

from forecasttools.deps import HttpCapabilities

SAMPLE_PAYLOAD = {
    "latitude": 37.8267,
    "longitude": -122.423,
    "timezone": "America/Los_Angeles",
    "offset": -8,
    "currently": {
        "time": 1389130200,
        "summary": "Clear",
        "icon": "clear-day",
        "temperature": 58.41,
        "apparentTemperature": 58.41,
        "humidity": 0.61,
        "windSpeed": 3.2,
        "ozone": 282.5,
    },
    "hourly": {
        "summary": "Clear throughout the day.",
        "icon": "clear-day",
        "data": [
            {"time": 1389128400, "temperature": 57.9},
            {"time": 1389132000, "temperature": 59.2},
        ],
    },
    "daily": {
        "summary": "No precipitation this week.",
        "data": [{"time": 1389081600, "summary": "Clear throughout the day.", "temperatureMax": 62.1}],
    },
    "alerts": [
        {
            "title": "Wind Advisory",
            "expires": 1389171600,
            "description": "Gusts up to 45 mph.",
            "uri": "http://alerts.weather.gov/cap/wwacapget.php?x=1",
        }
    ],
    "flags": {
        "darksky-stations": ["KMUX"],
        "isd-stations": ["724940-23234"],
        "sources": ["nwspa", "isd", "metar"],
        "units": "us",
    },
}


@pytest.fixture
def sample_payload() -> dict:
    return json.loads(json.dumps(SAMPLE_PAYLOAD))


@pytest.fixture
def sample_body() -> str:
    return json.dumps(SAMPLE_PAYLOAD)


def _mock_capabilities(handler, *, async_client: bool = True, sync_client: bool = True, cache=None) -> HttpCapabilities:
    """Build HttpCapabilities whose clients are served by the given MockTransport handler."""
    return HttpCapabilities(
        async_client_factory=(lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        if async_client
        else None,
        client_factory=(lambda: httpx.Client(transport=httpx.MockTransport(handler))) if sync_client else None,
        cache=cache,
    )


@pytest.fixture
def make_capabilities():
    return _mock_capabilities
