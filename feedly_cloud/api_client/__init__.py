"""Feedly Cloud API client package."""
from feedly_cloud.api_client.client import FeedlyClient

__all__ = ["FeedlyClient"]
