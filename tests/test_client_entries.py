"""Tests for the entry endpoints."""
import pytest
import responses
from responses import matchers

from feedly_cloud.exceptions import TimestampDecodeError

ENTRIES_URL = "https://cloud.feedly.com/v3/entries"
ENTRY_ID = "Xne8uW/IUiZhV1EuO2ZMzIrc2Ak6NlhGjboZ+Yk0rJ8=_1523699cbb3:2aa0463:e47a7aef"


@pytest.fixture
def entry_json():
    """Sample entry response."""
    return {
        "id": ENTRY_ID,
        "title": "NBC's reviled sitcom Outsourced",
        "author": "Nathan Rabin",
        "crawled": 1367734386923,
        "published": 1367734380000,
        "recrawled": None,
        "alternate": [{"href": "http://example.com/story", "type": "text/html"}],
        "unread": False,
        "fingerprint": "4e9e5a8d",
        "originId": "http://example.com/story",
    }


@responses.activate
def test_get_entry(client, entry_json):
    """Test fetching one entry by id."""
    responses.add(
        responses.GET,
        f"{ENTRIES_URL}/Xne8uW%2FIUiZhV1EuO2ZMzIrc2Ak6NlhGjboZ%2BYk0rJ8%3D_1523699cbb3%3A2aa0463%3Ae47a7aef",
        json=[entry_json],
    )

    entries = client.get_entry(ENTRY_ID)

    assert len(entries) == 1
    assert entries[0].id == ENTRY_ID
    assert entries[0].crawled.timestamp() == 1367734386
    assert entries[0].recrawled is None
    assert entries[0].unread is False


@responses.activate
def test_get_entries(client, entry_json):
    """Test fetching several entries in one call."""
    responses.add(
        responses.POST,
        f"{ENTRIES_URL}/.mget",
        json=[entry_json, dict(entry_json, id="other")],
        match=[matchers.json_params_matcher([ENTRY_ID, "other"])],
    )

    entries = client.get_entries([ENTRY_ID, "other"])

    assert [entry.id for entry in entries] == [ENTRY_ID, "other"]


@responses.activate
def test_get_entry_with_bad_timestamp(client, entry_json):
    """Test that malformed timestamps in responses are reported."""
    entry_json["published"] = "2013-05-05"
    responses.add(responses.POST, f"{ENTRIES_URL}/.mget", json=[entry_json])

    with pytest.raises(TimestampDecodeError):
        client.get_entries([ENTRY_ID])
