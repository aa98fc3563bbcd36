"""Shared read-through protocol for resource services."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from monolite.config import ConfigManager
from monolite.core.entities.cache_config import CacheConfig, CacheSettings
from monolite.core.interfaces.http_client import IHttpClient
from monolite.core.interfaces.key_builder import IKeyBuilder
from monolite.core.services.cache_service import CacheService
from monolite.exceptions import MonoliteError, NetworkError, ServerError
from monolite.infrastructure.http.client import build_url
from monolite.infrastructure.key_builders.default import CatalogKeyBuilder

logger = logging.getLogger(__name__)


def translate_error(exc: httpx.HTTPError) -> MonoliteError:
    """Map an httpx error onto the client's error taxonomy.

    Args:
        exc: The error raised by the HTTP façade.

    Returns:
        ``ServerError`` when a response was received, else ``NetworkError``.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return ServerError(exc.response.status_code)
    return NetworkError(f"Network error: {exc}" if str(exc) else "Network error")


class ResourceService:
    """Base class for catalog resource services.

    Every read goes through ``_fetch``: look the key up, return on a hit,
    otherwise call the API, cache the payload and return it. Concurrent
    misses on the same key are not coalesced; each one issues its own
    request.
    """

    resource: str = ""

    def __init__(
        self,
        http_client: IHttpClient,
        config_manager: ConfigManager,
        cache: CacheService,
        settings: CacheSettings | None = None,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            http_client: HTTP façade used on cache misses.
            config_manager: Read on every call for the base URL.
            cache: The process-wide cache service.
            settings: Cache TTLs and fallback behavior.
            key_builder: Builds keys and tags.
        """
        self._http = http_client
        self._config_manager = config_manager
        self._cache = cache
        self._settings = settings or CacheSettings()
        self._keys = key_builder or CatalogKeyBuilder()

    @property
    def cache(self) -> CacheService:
        return self._cache

    def _url(self, *path: Any) -> str:
        base_url = self._config_manager.get_config().base_url
        return build_url(base_url, "/".join(str(part) for part in path))

    def _tag(self, *parts: Any) -> str:
        return self._keys.tag(self.resource, *parts)

    async def _fetch(
        self,
        key: str,
        send: Callable[[], Awaitable[httpx.Response]],
        ttl: float,
        tags: list[str],
        *,
        unwrap: bool = True,
        stale_on_error: bool = False,
    ) -> Any:
        """Read-through fetch for one operation.

        Args:
            key: Cache key for the operation.
            send: Issues the HTTP request when the cache misses.
            ttl: TTL in seconds for the stored payload.
            tags: Tags for the stored payload.
            unwrap: Return the body's ``data`` member instead of the body.
            stale_on_error: Fall back to the retained copy when the API is
                unreachable or answers with a 5xx status.

        Returns:
            The cached or freshly fetched payload.

        Raises:
            ServerError: The API answered with an error status.
            NetworkError: No response was received.
        """
        use_cache = self._settings.enabled
        if use_cache:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        try:
            response = await send()
        except httpx.HTTPError as exc:
            error = translate_error(exc)
            if use_cache and stale_on_error and self._can_fall_back(error):
                stale = self._cache.get_stale(key)
                if stale is not None:
                    logger.warning("Serving stale %s after: %s", key, error)
                    return stale
            logger.warning("Request for %s failed: %s", key, error)
            raise error from exc

        value = self._decode(response, unwrap)

        if use_cache:
            stale_ttl = (
                self._settings.stale_ttl
                if stale_on_error and self._settings.stale_on_error
                else None
            )
            self._cache.set(key, value, CacheConfig(ttl=ttl, tags=tags), stale_ttl=stale_ttl)

        return value

    def _can_fall_back(self, error: MonoliteError) -> bool:
        if not self._settings.stale_on_error:
            return False
        if isinstance(error, ServerError):
            return error.status_code >= 500
        return True

    @staticmethod
    def _decode(response: httpx.Response, unwrap: bool) -> Any:
        try:
            body = response.json()
            return body["data"] if unwrap else body
        except (ValueError, KeyError, TypeError) as exc:
            raise ServerError(
                response.status_code, "Malformed response payload"
            ) from exc
