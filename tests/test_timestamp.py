"""Tests for the millisecond epoch timestamp codec."""
import json
from datetime import datetime, timedelta, timezone

import pytest

from feedly_cloud.exceptions import TimestampDecodeError
from feedly_cloud.timestamp import EPOCH, decode_timestamp, encode_timestamp

NEW_YEAR_2021 = datetime(2021, 1, 1, tzinfo=timezone.utc)


def test_encode_new_year_2021():
    """Test encoding a known instant."""
    assert encode_timestamp(NEW_YEAR_2021) == 1609459200000


def test_decode_new_year_2021():
    """Test decoding a known wire value."""
    decoded = decode_timestamp(1609459200000)
    assert decoded == NEW_YEAR_2021
    assert decoded.timestamp() == 1609459200
    assert decoded.tzinfo == timezone.utc


def test_encode_drops_sub_second_precision():
    """Test that encoding keeps whole seconds only."""
    instant = NEW_YEAR_2021 + timedelta(milliseconds=999)
    assert encode_timestamp(instant) == 1609459200000


def test_decode_truncates_milliseconds():
    """Test that the millisecond remainder is discarded on decode."""
    assert decode_timestamp(1700000000500).timestamp() == 1700000000


def test_naive_datetime_treated_as_utc():
    """Test that naive datetimes are encoded as UTC."""
    assert encode_timestamp(datetime(2021, 1, 1)) == 1609459200000


def test_encode_uses_utc_offset():
    """Test that timezone-aware datetimes are converted to UTC first."""
    paris = timezone(timedelta(hours=1))
    instant = datetime(2021, 1, 1, 1, 0, tzinfo=paris)
    assert encode_timestamp(instant) == 1609459200000


@pytest.mark.parametrize("seconds", [0, 1, 59, 1609459200, 1749922440])
def test_round_trip_whole_seconds(seconds):
    """Test that whole-second instants survive encode then decode."""
    instant = EPOCH + timedelta(seconds=seconds)
    assert decode_timestamp(encode_timestamp(instant)).timestamp() == seconds


def test_decode_zero_is_epoch():
    """Test that zero decodes to the epoch rather than unset."""
    assert decode_timestamp(0) == EPOCH


def test_decode_negative_values():
    """Test timestamps before 1970."""
    assert decode_timestamp(-86400000) == datetime(1969, 12, 31, tzinfo=timezone.utc)
    # Truncation goes toward zero
    assert decode_timestamp(-1500) == EPOCH - timedelta(seconds=1)


def test_encode_negative_values():
    """Test encoding instants before 1970."""
    instant = datetime(1969, 12, 31, tzinfo=timezone.utc)
    assert encode_timestamp(instant) == -86400000


def test_decode_null_is_unset():
    """Test that JSON null decodes to None without error."""
    assert decode_timestamp(json.loads("null")) is None


@pytest.mark.parametrize("value", ["abc", "1609459200000", True, False, {}, [], 1.5, 1e12])
def test_decode_rejects_non_integers(value):
    """Test that non-integer wire values raise TimestampDecodeError."""
    with pytest.raises(TimestampDecodeError) as excinfo:
        decode_timestamp(value)

    assert "invalid timestamp representation" in str(excinfo.value)


def test_decode_error_is_value_error():
    """Test that decode errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        decode_timestamp("abc")


@pytest.mark.parametrize("value", [10**17, 9223372036854775807, -9223372036854775808])
def test_decode_out_of_range_values(value):
    """Test that integers beyond the datetime range raise TimestampDecodeError."""
    with pytest.raises(TimestampDecodeError) as excinfo:
        decode_timestamp(value)

    assert "out of range" in str(excinfo.value)
