"""Helpers shared by the resource models."""
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TypeVar

from feedly_cloud.exceptions import FeedlyResponseError
from feedly_cloud.timestamp import encode_timestamp

T = TypeVar("T")


def drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of data without the keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def optional_timestamp(instant: Optional[datetime]) -> Optional[int]:
    """Encode a timestamp, passing None through."""
    if instant is None:
        return None
    return encode_timestamp(instant)


def require_dict(data: Any, kind: str) -> Dict[str, Any]:
    """Check that a decoded JSON value is an object."""
    if not isinstance(data, dict):
        raise FeedlyResponseError(
            f"Expected a JSON object for {kind}, got {type(data).__name__}"
        )
    return data


def list_of(
    items: Optional[List[Any]], factory: Callable[[Dict[str, Any]], T]
) -> Optional[List[T]]:
    """Build a list of models from a list of dicts, keeping None as None."""
    if items is None:
        return None
    if not isinstance(items, list):
        raise FeedlyResponseError(
            f"Expected a JSON array, got {type(items).__name__}"
        )
    return [factory(item) for item in items]


def dump_list(items: Optional[List[Any]]) -> Optional[List[Dict[str, Any]]]:
    """Serialize a list of models, keeping None as None."""
    if items is None:
        return None
    return [item.to_dict() for item in items]
