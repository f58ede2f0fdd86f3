"""Client library for the Feedly Cloud REST API."""
from feedly_cloud.api_client import FeedlyClient
from feedly_cloud.config import ClientConfig
from feedly_cloud.exceptions import (
    CoverImageError,
    FeedlyAPIError,
    FeedlyError,
    FeedlyResponseError,
    TimestampDecodeError,
)
from feedly_cloud.multipart import MultipartBody, encode_cover_image
from feedly_cloud.timestamp import decode_timestamp, encode_timestamp

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "CoverImageError",
    "FeedlyAPIError",
    "FeedlyClient",
    "FeedlyError",
    "FeedlyResponseError",
    "MultipartBody",
    "TimestampDecodeError",
    "decode_timestamp",
    "encode_cover_image",
    "encode_timestamp",
]
