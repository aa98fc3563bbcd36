"""Client configuration: API base URL and license key."""

import logging
import os
import threading
from dataclasses import dataclass

from monolite.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.autoxpert.com.co"
API_VERSION = "v2"
LICENSE_KEY_HEADER = "X-License-Key"

BASE_URL_ENV = "MONOLITE_BASE_URL"
LICENSE_KEY_ENV = "MONOLITE_LICENSE_KEY"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable snapshot of the client configuration.

    Attributes:
        base_url: Versioned API root, without trailing slash.
        license_key: Value sent in the ``X-License-Key`` header. Empty
            means no header is sent.
    """

    base_url: str = f"{DEFAULT_API_URL}/{API_VERSION}"
    license_key: str = ""


def normalize_base_url(url: str) -> str:
    """Strip trailing slashes and append the API version if missing.

    Args:
        url: Base URL as given by the user.

    Returns:
        The versioned base URL.
    """
    url = url.rstrip("/")
    if url.endswith(f"/{API_VERSION}"):
        return url
    return f"{url}/{API_VERSION}"


class ConfigManager:
    """Holds the mutable client configuration.

    Services keep a reference to the manager and call ``get_config()``
    on every request, so changes made through the setters apply to
    services that already exist.
    """

    def __init__(self, base_url: str | None = None, license_key: str = "") -> None:
        """Initialize the configuration.

        Args:
            base_url: Optional base URL; defaults to the public API.
            license_key: Optional license key.
        """
        self._lock = threading.Lock()
        self._config = ClientConfig(
            base_url=normalize_base_url(base_url) if base_url else ClientConfig.base_url,
            license_key=license_key,
        )

    @classmethod
    def from_env(cls) -> "ConfigManager":
        """Build a manager from ``MONOLITE_BASE_URL`` and ``MONOLITE_LICENSE_KEY``."""
        base_url = os.getenv(BASE_URL_ENV) or None
        license_key = os.getenv(LICENSE_KEY_ENV, "")
        if not license_key:
            logger.warning("%s is not set; requests will be unauthenticated", LICENSE_KEY_ENV)
        return cls(base_url=base_url, license_key=license_key)

    def set_base_url(self, url: str) -> None:
        """Replace the base URL.

        Args:
            url: New base URL. The API version is appended when missing.

        Raises:
            ConfigurationError: If the URL is empty.
        """
        if not url:
            raise ConfigurationError("Base URL must not be empty")
        with self._lock:
            self._config = ClientConfig(
                base_url=normalize_base_url(url),
                license_key=self._config.license_key,
            )

    def set_license_key(self, key: str) -> None:
        """Replace the license key.

        Args:
            key: New license key.

        Raises:
            ConfigurationError: If the key is empty.
        """
        if not key:
            raise ConfigurationError("License key must not be empty")
        with self._lock:
            self._config = ClientConfig(
                base_url=self._config.base_url,
                license_key=key,
            )

    def get_config(self) -> ClientConfig:
        """Return the current configuration snapshot."""
        return self._config
