"""Pytest configuration."""
import os
from typing import Generator

import pytest

from feedly_cloud.api_client import FeedlyClient
from feedly_cloud.config import ClientConfig


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test that requires external services",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as a unit test that can run in isolation",
    )


@pytest.fixture(scope="function", autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Clean environment variables before and after each test."""
    original_env = dict(os.environ)

    for var in [
        "FEEDLY_TOKEN",
        "FEEDLY_BASE_URL",
        "FEEDLY_API_VERSION",
        "FEEDLY_TIMEOUT",
    ]:
        os.environ.pop(var, None)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def client_config() -> ClientConfig:
    """Explicit configuration pointing at the production API."""
    return ClientConfig(token="test-token")


@pytest.fixture
def client(client_config) -> Generator[FeedlyClient, None, None]:
    """Create a Feedly client instance."""
    feedly_client = FeedlyClient(client_config)
    yield feedly_client
    feedly_client.close()


def pytest_collection_modifyitems(config, items):
    """Handle test markers and skip logic."""
    run_integration = config.getoption("--integration", default=False)

    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if "integration" in item.keywords and not run_integration:
            item.add_marker(pytest.mark.skip(reason="need --integration option to run"))


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
