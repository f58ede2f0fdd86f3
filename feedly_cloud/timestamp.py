"""Conversion between datetimes and Feedly's millisecond epoch timestamps.

Feedly sends every timestamp as an integer number of milliseconds since
the Unix epoch. Encoding keeps whole seconds only (``seconds * 1000``) and
decoding drops the millisecond remainder, so values round-trip at
one-second resolution.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from feedly_cloud.exceptions import TimestampDecodeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


def encode_timestamp(instant: datetime) -> int:
    """Encode a datetime as a millisecond epoch timestamp.

    Args:
        instant: Point in time. Naive datetimes are treated as UTC.

    Returns:
        Whole seconds since the epoch multiplied by 1000
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    seconds = (instant - EPOCH) // _ONE_SECOND
    return seconds * 1000


def decode_timestamp(value: Any) -> Optional[datetime]:
    """Decode a millisecond epoch timestamp into a UTC datetime.

    Args:
        value: Wire value, an integer or None

    Returns:
        UTC datetime truncated to whole seconds, or None when unset

    Raises:
        TimestampDecodeError: If value is not an integer or None
    """
    if value is None:
        return None
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise TimestampDecodeError(
            f"invalid timestamp representation: {value!r}"
        )
    seconds = abs(value) // 1000
    if value < 0:
        seconds = -seconds
    try:
        return EPOCH + timedelta(seconds=seconds)
    except (OverflowError, OSError) as e:
        raise TimestampDecodeError(f"timestamp out of range: {value!r}") from e
