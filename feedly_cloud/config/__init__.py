"""Configuration for the Feedly Cloud client."""
from feedly_cloud.config.client_config import (
    ClientConfig,
    ClientConfigProvider,
    EnvironmentClientConfigProvider,
    FileClientConfigProvider,
    StaticClientConfigProvider,
)
from feedly_cloud.config.logging_config import setup_logging

__all__ = [
    "ClientConfig",
    "ClientConfigProvider",
    "EnvironmentClientConfigProvider",
    "FileClientConfigProvider",
    "StaticClientConfigProvider",
    "setup_logging",
]
