# ABOUTME: Historical weather call for the Weatherstack API.
# ABOUTME: Validates the date range, encodes the query string and delegates the GET to a transport.

import logging
from datetime import date
from typing import Protocol, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from weatherstack.errors import InvalidRangeError, RangeTooWideError
from weatherstack.models import HistoricalResponse, Hourly, Interval, Units

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
MAX_DAYS_PER_CALL = 60
HISTORICAL_PATH = "historical"

ModelT = TypeVar("ModelT", bound=BaseModel)


class WeatherstackTransport(Protocol):
    """What the historical call needs from the surrounding service."""

    def url(self, path: str) -> str:
        """Turn a relative path (with query) into an absolute, authenticated URL."""
        ...

    async def get(self, url: str, response_model: type[ModelT]) -> ModelT:
        """GET the URL and decode the JSON body into ``response_model``."""
        ...


class HistoricalWeatherConfig(BaseModel):
    """Parameters of one historical request.

    Optional fields left as None are not sent, so the server default applies.
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(min_length=1)
    start_date: date
    end_date: date | None = None
    hourly: Hourly | None = None
    interval: Interval | None = None
    units: Units | None = None
    language: str | None = None


def build_historical_query(config: HistoricalWeatherConfig) -> str:
    """Validate the config and return the relative path ``historical?<params>``.

    Raises:
        InvalidRangeError: If end_date is before start_date.
        RangeTooWideError: If the range covers more than MAX_DAYS_PER_CALL days.
    """
    params: dict[str, str] = {}

    if config.end_date is None:
        params["historical_date"] = config.start_date.strftime(DATE_FORMAT)
    else:
        if config.start_date > config.end_date:
            raise InvalidRangeError("StartDate must be smaller or equal to EndDate.")
        if (config.end_date - config.start_date).days > MAX_DAYS_PER_CALL - 1:
            raise RangeTooWideError(f"Maximum time frame of {MAX_DAYS_PER_CALL} days exceeded.")
        params["historical_date_start"] = config.start_date.strftime(DATE_FORMAT)
        params["historical_date_end"] = config.end_date.strftime(DATE_FORMAT)

    params["query"] = config.query

    if config.hourly is not None:
        params["hourly"] = str(config.hourly.value)
    if config.interval is not None:
        params["interval"] = str(config.interval.value)
    if config.units is not None:
        params["units"] = config.units.value
    if config.language is not None:
        params["language"] = config.language

    return f"{HISTORICAL_PATH}?{urlencode(sorted(params.items()))}"


async def get_historical_weather(
    transport: WeatherstackTransport, config: HistoricalWeatherConfig
) -> HistoricalResponse:
    """Fetch historical weather for a location and a day or range of days.

    Validation happens before the transport is touched. Errors raised by the
    transport (HTTP, decoding, API error envelope) propagate unchanged.
    """
    path = build_historical_query(config)
    logger.debug("Requesting %s", path)
    return await transport.get(transport.url(path), HistoricalResponse)
