"""Integration test against a live Feedly API.

Needs FEEDLY_INTEGRATION_TOKEN and the --integration option.
"""
import os

import pytest

from feedly_cloud.api_client import FeedlyClient
from feedly_cloud.config import ClientConfig


@pytest.fixture
def live_client():
    """Client for the API named by FEEDLY_INTEGRATION_BASE_URL."""
    token = os.environ.get("FEEDLY_INTEGRATION_TOKEN")
    if not token:
        pytest.skip("FEEDLY_INTEGRATION_TOKEN not set")
    config = ClientConfig(
        token=token,
        base_url=os.environ.get(
            "FEEDLY_INTEGRATION_BASE_URL", "https://sandbox7.feedly.com"
        ),
        timeout=20.0,
    )
    client = FeedlyClient(config)
    yield client
    client.close()


def test_get_profile(live_client):
    """Test fetching the token owner's profile."""
    profile = live_client.get_profile()
    assert profile.id


def test_list_collections(live_client):
    """Test listing the token owner's collections."""
    collections = live_client.list_collections()
    assert all(collection.id for collection in collections)
