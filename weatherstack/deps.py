# ABOUTME: Configuration and HTTP client construction for the Weatherstack service.
# ABOUTME: Reads settings from the environment (.env supported) and builds a retrying httpx.AsyncClient.

import os

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic_ai.retries import AsyncTenacityTransport, RetryConfig, wait_retry_after
from tenacity import retry_if_exception_type, stop_after_attempt

from weatherstack.errors import WeatherstackError

DEFAULT_BASE_URL = "http://api.weatherstack.com"
DEFAULT_TIMEOUT = 30.0

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class WeatherstackSettings(BaseModel):
    """Settings needed to talk to the Weatherstack API."""

    access_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_settings() -> WeatherstackSettings:
    """Load settings from WEATHERSTACK_* environment variables, reading .env first."""
    load_dotenv()
    access_key = os.environ.get("WEATHERSTACK_ACCESS_KEY", "")
    if not access_key:
        raise WeatherstackError("WEATHERSTACK_ACCESS_KEY is not set")
    return WeatherstackSettings(
        access_key=access_key,
        base_url=os.environ.get("WEATHERSTACK_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.environ.get("WEATHERSTACK_TIMEOUT", DEFAULT_TIMEOUT)),
    )


def _raise_for_retryable_status(response: httpx.Response) -> None:
    if response.status_code in RETRYABLE_STATUS_CODES:
        response.raise_for_status()


def create_http_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create an httpx client with tenacity retry on transient HTTP errors.

    Retries connection errors, read timeouts, and 429/5xx responses, honouring
    Retry-After. Other status codes are left to the caller.
    """
    transport = AsyncTenacityTransport(
        RetryConfig(
            retry=retry_if_exception_type((httpx.ConnectError, httpx.ReadTimeout, httpx.HTTPStatusError)),
            wait=wait_retry_after(max_wait=30),
            stop=stop_after_attempt(3),
            reraise=True,
        ),
        validate_response=_raise_for_retryable_status,
    )
    return httpx.AsyncClient(transport=transport, timeout=timeout)
