# ABOUTME: httpx-backed transport for the Weatherstack API.
# ABOUTME: Builds authenticated URLs, performs GETs, and decodes bodies or raises on the error envelope.

import logging
from urllib.parse import urlencode

import httpx

from weatherstack.deps import DEFAULT_BASE_URL, create_http_client, load_settings
from weatherstack.errors import WeatherstackAPIError
from weatherstack.historical import HistoricalWeatherConfig, ModelT, get_historical_weather
from weatherstack.models import ErrorEnvelope, HistoricalResponse

logger = logging.getLogger(__name__)


class WeatherstackService:
    """Async client for the Weatherstack API.

    Satisfies the transport protocol used by the historical call, so it can be
    passed to ``get_historical_weather`` directly.
    """

    def __init__(
        self,
        access_key: str,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize the service.

        Args:
            access_key: Weatherstack API access key, appended to every URL.
            http_client: Client used for requests. Closed by ``aclose``.
            base_url: API root, without trailing path.
        """
        self.access_key = access_key
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_env(cls, http_client: httpx.AsyncClient | None = None) -> "WeatherstackService":
        """Build a service from WEATHERSTACK_* environment variables."""
        settings = load_settings()
        return cls(
            access_key=settings.access_key,
            http_client=http_client if http_client is not None else create_http_client(settings.timeout),
            base_url=settings.base_url,
        )

    def url(self, path: str) -> str:
        separator = "&" if "?" in path else "?"
        return f"{self.base_url}/{path.lstrip('/')}{separator}{urlencode({'access_key': self.access_key})}"

    async def get(self, url: str, response_model: type[ModelT]) -> ModelT:
        """GET ``url`` and decode the JSON body into ``response_model``.

        Raises:
            httpx.HTTPError: On transport failure or an HTTP error status.
            WeatherstackAPIError: If the body is the API's error envelope.
            pydantic.ValidationError: If the body does not match the model.
        """
        logger.debug("GET %s", httpx.URL(url).path)
        resp = await self.http_client.get(url)
        resp.raise_for_status()
        data = resp.json()

        if isinstance(data, dict) and "error" in data:
            envelope = ErrorEnvelope.model_validate(data)
            if not envelope.success and envelope.error is not None:
                logger.warning("Weatherstack API error %s: %s", envelope.error.code, envelope.error.type)
                raise WeatherstackAPIError(envelope.error.code, envelope.error.type, envelope.error.info)

        return response_model.model_validate(data)

    async def get_historical_weather(self, config: HistoricalWeatherConfig) -> HistoricalResponse:
        """Fetch historical weather using this service as transport."""
        return await get_historical_weather(self, config)

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
