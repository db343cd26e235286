# ABOUTME: Shared test fixtures for the Weatherstack client test suite.
# ABOUTME: Provides a recorded historical response body and an in-memory transport.

import copy

import pytest

HISTORICAL_BODY = {
    "request": {"type": "City", "query": "Tokyo, Japan", "language": "en", "unit": "m"},
    "location": {
        "name": "Tokyo",
        "country": "Japan",
        "region": "Tokyo",
        "lat": "35.690",
        "lon": "139.692",
        "timezone_id": "Asia/Tokyo",
        "localtime": "2023-11-15 07:13",
        "localtime_epoch": 1700000000,
        "utc_offset": "9.0",
    },
    "current": {
        "observation_time": "10:13 PM",
        "temperature": 12,
        "weather_code": 113,
        "weather_icons": ["https://cdn.worldweatheronline.com/images/wsymbols01_png_64/wsymbol_0008_clear_sky_night.png"],
        "weather_descriptions": ["Clear"],
        "wind_speed": 7,
        "wind_degree": 330,
        "wind_dir": "NNW",
        "pressure": 1021,
        "precip": 0,
        "humidity": 58,
        "cloudcover": 0,
        "feelslike": 11,
        "uv_index": 1,
        "visibility": 10,
        "is_day": "no",
    },
    "historical": {
        "2024-02-15": {
            "date": "2024-02-15",
            "date_epoch": 1707955200,
            "astro": {
                "sunrise": "06:25 AM",
                "sunset": "05:25 PM",
                "moonrise": "09:41 AM",
                "moonset": "No moonset",
                "moon_phase": "Waxing Crescent",
                "moon_illumination": 30,
            },
            "mintemp": 6,
            "maxtemp": 17,
            "avgtemp": 11,
            "totalsnow": 0,
            "sunhour": 10.3,
            "uv_index": 4,
            "hourly": [
                {
                    "time": "0",
                    "temperature": 8,
                    "wind_speed": 9,
                    "wind_degree": 20,
                    "wind_dir": "NNE",
                    "weather_code": 116,
                    "weather_icons": [
                        "https://cdn.worldweatheronline.com/images/wsymbols01_png_64/wsymbol_0004_black_low_cloud.png",
                        "https://cdn.worldweatheronline.com/images/wsymbols01_png_64/wsymbol_0002_sunny_intervals.png",
                    ],
                    "weather_descriptions": ["Partly cloudy", "Sunny intervals"],
                    "precip": 0.1,
                    "humidity": 71,
                    "visibility": 10,
                    "pressure": 1019,
                    "cloudcover": 32,
                    "heatindex": 8,
                    "dewpoint": 3,
                    "windchill": 6,
                    "windgust": 14,
                    "feelslike": 6,
                    "chanceofrain": 0,
                    "chanceofremdry": 88,
                    "chanceofwindy": 0,
                    "chanceofovercast": 41,
                    "chanceofsunshine": 76,
                    "chanceoffrost": 0,
                    "chanceofhightemp": 0,
                    "chanceoffog": 0,
                    "chanceofsnow": 0,
                    "chanceofthunder": 0,
                    "uv_index": 1,
                },
                {"time": "300", "temperature": 7, "weather_descriptions": ["Clear"]},
            ],
        }
    },
}


class FakeTransport:
    """In-memory transport that records requested URLs and decodes a fixed body."""

    def __init__(self, body: dict):
        self.body = body
        self.requested_urls: list[str] = []

    def url(self, path: str) -> str:
        return f"https://api.test/{path}"

    async def get(self, url, response_model):
        self.requested_urls.append(url)
        return response_model.model_validate(self.body)


@pytest.fixture
def historical_body() -> dict:
    return copy.deepcopy(HISTORICAL_BODY)


@pytest.fixture
def fake_transport(historical_body) -> FakeTransport:
    return FakeTransport(historical_body)
