# ABOUTME: Exception types raised by the Weatherstack client.
# ABOUTME: Covers local date-range validation failures and the upstream error envelope.


class WeatherstackError(Exception):
    """Base class for errors raised by this package."""


class HistoricalRangeError(WeatherstackError, ValueError):
    """The requested historical date range is not acceptable."""


class InvalidRangeError(HistoricalRangeError):
    """The end date lies before the start date."""


class RangeTooWideError(HistoricalRangeError):
    """The requested range spans more days than a single call allows."""


class WeatherstackAPIError(WeatherstackError):
    """The API answered with its error envelope instead of data.

    Weatherstack reports most failures (bad access key, quota reached, unknown
    location) with HTTP 200 and a body of the form
    ``{"success": false, "error": {"code": ..., "type": ..., "info": ...}}``.
    """

    def __init__(self, code: int, type: str, info: str):
        super().__init__(f"{type} ({code}): {info}")
        self.code = code
        self.type = type
        self.info = info
