# ABOUTME: Enumerations and Pydantic BaseModels for the Weatherstack historical endpoint.
# ABOUTME: Mirrors the JSON body field by field; unknown keys are ignored, missing keys decode to zero values.

import datetime
from enum import Enum, IntEnum

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Hourly(IntEnum):
    """Whether hourly slots are included for each day."""

    OFF = 0
    ON = 1


class Interval(IntEnum):
    """Step between hourly slots when hourly data is requested."""

    ONE_HOUR = 1
    THREE_HOURS = 3
    SIX_HOURS = 6
    DAY_NIGHT = 12
    DAY_AVERAGE = 24


class Units(str, Enum):
    """Unit system the values are returned in."""

    METRIC = "m"
    SCIENTIFIC = "s"
    FAHRENHEIT = "f"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null means "not sent", so the field default applies
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Request(_Record):
    """The server's interpretation of the request."""

    type: str = ""
    query: str = ""
    language: str = ""
    unit: str = ""


class Location(_Record):
    """Resolved location. Coordinates are kept as the strings the API returns."""

    name: str = ""
    country: str = ""
    region: str = ""
    lat: str = ""
    lon: str = ""
    timezone_id: str = ""
    localtime: str = ""
    localtime_epoch: int = 0
    utc_offset: str = ""


class CurrentWeather(_Record):
    """Observation at the queried location at request time."""

    observation_time: str = ""
    temperature: int = 0
    weather_code: int = 0
    weather_icons: list[str] = []
    weather_descriptions: list[str] = []
    wind_speed: int = 0
    wind_degree: int = 0
    wind_dir: str = ""
    pressure: int = 0
    precip: float = 0.0
    humidity: int = 0
    cloudcover: int = 0
    feelslike: int = 0
    uv_index: int = 0
    visibility: int = 0
    # "yes" or "no", not a boolean
    is_day: str = ""


class Astro(_Record):
    """Sun and moon data for one day.

    Rise and set times are clock strings such as ``"05:21 AM"``; the API may
    also send ``"No moonrise"`` or ``"No moonset"``.
    """

    sunrise: str = ""
    sunset: str = ""
    moonrise: str = ""
    moonset: str = ""
    moon_phase: str = ""
    moon_illumination: int = 0


class HourlyWeather(_Record):
    """One slot within a historical day."""

    time: str = ""
    temperature: int = 0
    wind_speed: int = 0
    wind_degree: int = 0
    wind_dir: str = ""
    weather_code: int = 0
    weather_icons: list[str] = []
    weather_descriptions: list[str] = []
    precip: float = 0.0
    humidity: int = 0
    visibility: int = 0
    pressure: int = 0
    cloudcover: int = 0
    heatindex: int = 0
    dewpoint: int = 0
    windchill: int = 0
    windgust: int = 0
    feelslike: int = 0
    chanceofrain: int = 0
    chanceofremdry: int = 0
    chanceofwindy: int = 0
    chanceofovercast: int = 0
    chanceofsunshine: int = 0
    chanceoffrost: int = 0
    chanceofhightemp: int = 0
    chanceoffog: int = 0
    chanceofsnow: int = 0
    chanceofthunder: int = 0
    uv_index: int = 0

    @property
    def clock_time(self) -> datetime.time:
        """Parse the slot label ("0", "300", "1500", ...) into a time of day.

        Raises:
            ValueError: If the label is not a valid HHMM value.
        """
        if not (self.time.isascii() and self.time.isdigit()) or len(self.time) > 4:
            raise ValueError(f"Invalid hourly time label: {self.time!r}")
        hours, minutes = divmod(int(self.time), 100)
        return datetime.time(hours, minutes)


class HistoricalWeather(_Record):
    """Aggregates and hourly slots for one day of the requested range."""

    date: str = ""
    date_epoch: int = 0
    astro: Astro = Field(default_factory=Astro)
    mintemp: int = 0
    maxtemp: int = 0
    avgtemp: int = 0
    totalsnow: float = 0.0
    sunhour: float = 0.0
    uv_index: int = 0
    hourly: list[HourlyWeather] = []


class HistoricalResponse(_Record):
    """Decoded body of the historical endpoint."""

    request: Request = Field(default_factory=Request)
    location: Location = Field(default_factory=Location)
    current: CurrentWeather = Field(default_factory=CurrentWeather)
    # keyed by YYYY-MM-DD
    historical: dict[str, HistoricalWeather] = {}


class ErrorInfo(_Record):
    """Code, type and message of an API failure."""

    code: int = 0
    type: str = ""
    info: str = ""


class ErrorEnvelope(_Record):
    """Body the API returns instead of data when a request fails."""

    success: bool = True
    error: ErrorInfo | None = None
