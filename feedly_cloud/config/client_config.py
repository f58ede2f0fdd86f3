"""Feedly client configuration classes for dependency injection."""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict
from urllib.parse import quote

import yaml

DEFAULT_BASE_URL = "https://cloud.feedly.com"
DEFAULT_VERSION = "v3"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Feedly Cloud connection configuration."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def get_api_url(self, *segments: str) -> str:
        """Construct an API URL from path segments.

        Each segment is percent-encoded on its own, so ids containing
        slashes (``user/<uid>/category/<label>``) stay a single segment.
        """
        parts = [self.base_url.rstrip("/"), self.version]
        parts.extend(quote(segment, safe=".") for segment in segments)
        return "/".join(parts)


class ClientConfigProvider(ABC):
    """Abstract base class for client configuration providers."""

    @abstractmethod
    def get_config(self) -> ClientConfig:
        """Get client configuration."""
        pass


class EnvironmentClientConfigProvider(ClientConfigProvider):
    """Client configuration provider that reads from environment variables."""

    def get_config(self) -> ClientConfig:
        """Get client configuration from environment variables.

        Raises:
            ValueError: If FEEDLY_TOKEN is not set or FEEDLY_TIMEOUT is invalid
        """
        token = os.getenv("FEEDLY_TOKEN", "")
        if not token:
            raise ValueError("FEEDLY_TOKEN environment variable not set")

        base_url = os.getenv("FEEDLY_BASE_URL") or DEFAULT_BASE_URL
        version = os.getenv("FEEDLY_API_VERSION") or DEFAULT_VERSION
        timeout = float(os.getenv("FEEDLY_TIMEOUT") or DEFAULT_TIMEOUT)

        return ClientConfig(
            token=token, base_url=base_url, version=version, timeout=timeout
        )


class StaticClientConfigProvider(ClientConfigProvider):
    """Client configuration provider for testing with explicit values."""

    def __init__(self, config: ClientConfig):
        """Initialize with explicit configuration."""
        self._config = config

    def get_config(self) -> ClientConfig:
        """Get the explicit client configuration."""
        return self._config


class FileClientConfigProvider(ClientConfigProvider):
    """Client configuration provider that reads a YAML file.

    The file holds a ``feedly`` section::

        feedly:
          token: <access token>
          base_url: https://sandbox7.feedly.com
          version: v3
          timeout: 20
    """

    def __init__(self, config_path: str):
        """Initialize file configuration.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = config_path

    def _load_section(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f)
            if not isinstance(config, dict) or not isinstance(
                config.get("feedly"), dict
            ):
                raise ValueError("Invalid config format: missing feedly section")
            return config["feedly"]
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ValueError(f"Error loading client config: {str(e)}") from e

    def get_config(self) -> ClientConfig:
        """Get client configuration from the YAML file.

        Raises:
            ValueError: If the file cannot be read or has no token
        """
        section = self._load_section()
        if not section.get("token"):
            raise ValueError(f"No token configured in {self.config_path}")

        return ClientConfig(
            token=str(section["token"]),
            base_url=section.get("base_url") or DEFAULT_BASE_URL,
            version=str(section.get("version") or DEFAULT_VERSION),
            timeout=float(section.get("timeout") or DEFAULT_TIMEOUT),
        )
