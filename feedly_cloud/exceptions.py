"""Exceptions raised by the Feedly Cloud client."""
from typing import Optional


class FeedlyError(Exception):
    """Base class for all client errors."""


class FeedlyAPIError(FeedlyError):
    """The API call failed at the transport or HTTP level."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class FeedlyResponseError(FeedlyError):
    """The response body could not be decoded into the expected type."""


class TimestampDecodeError(FeedlyError, ValueError):
    """A wire timestamp was neither an integer nor null."""


class CoverImageError(FeedlyError, OSError):
    """The cover image stream could not be read into a multipart body."""
