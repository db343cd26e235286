# ABOUTME: Async client for the Weatherstack historical weather endpoint.
# ABOUTME: Re-exports the configuration, call, response models and errors.

from weatherstack.errors import (
    HistoricalRangeError,
    InvalidRangeError,
    RangeTooWideError,
    WeatherstackAPIError,
    WeatherstackError,
)
from weatherstack.historical import (
    DATE_FORMAT,
    MAX_DAYS_PER_CALL,
    HistoricalWeatherConfig,
    WeatherstackTransport,
    build_historical_query,
    get_historical_weather,
)
from weatherstack.models import (
    Astro,
    CurrentWeather,
    HistoricalResponse,
    HistoricalWeather,
    Hourly,
    HourlyWeather,
    Interval,
    Location,
    Request,
    Units,
)
from weatherstack.service import WeatherstackService

__all__ = [
    "DATE_FORMAT",
    "MAX_DAYS_PER_CALL",
    "Astro",
    "CurrentWeather",
    "HistoricalRangeError",
    "HistoricalResponse",
    "HistoricalWeather",
    "HistoricalWeatherConfig",
    "Hourly",
    "HourlyWeather",
    "Interval",
    "InvalidRangeError",
    "Location",
    "RangeTooWideError",
    "Request",
    "Units",
    "WeatherstackAPIError",
    "WeatherstackError",
    "WeatherstackService",
    "WeatherstackTransport",
    "build_historical_query",
    "get_historical_weather",
]
