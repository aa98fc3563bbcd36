"""Cache service - single access point to the shared cache store."""

import logging
import threading
from typing import Any
from urllib.parse import quote

from monolite.core.entities.cache_config import CacheConfig
from monolite.core.interfaces.cache_store import ICacheStore

logger = logging.getLogger(__name__)

STALE_PREFIX = "stale:"
USER_PREFIX = "user"


class UserCacheView:
    """Per-user namespace over the shared store.

    Keys and tags are prefixed with ``user:<user_id>:`` and every entry is
    also tagged ``user:<user_id>`` so a user's namespace can be cleared
    without touching other users or the shared namespace. The user id is
    percent-encoded, so it never contains the ``:`` separator and no two
    users share a prefix.
    """

    def __init__(self, service: "CacheService") -> None:
        self._service = service

    def get(self, user_id: str, key: str) -> Any | None:
        """Look up a live entry in one user's namespace.

        Args:
            user_id: Owner of the entry.
            key: The cache key within the user's namespace.

        Returns:
            The cached value, or None on a miss.
        """
        return self._service.get(self._key(user_id, key))

    def set(self, user_id: str, key: str, value: Any, config: CacheConfig) -> None:
        """Store a value in one user's namespace.

        Args:
            user_id: Owner of the entry.
            key: The cache key within the user's namespace.
            value: The value to cache.
            config: TTL and tags; tags are scoped to the user.
        """
        tags = [self._key(user_id, tag) for tag in config.tags]
        tags.append(self._namespace(user_id))
        self._service.set(
            self._key(user_id, key),
            value,
            CacheConfig(ttl=config.ttl, tags=tags),
        )

    def invalidate(self, user_id: str, tags: list[str]) -> int:
        """Invalidate one user's entries by tags.

        Args:
            user_id: Owner of the entries.
            tags: Tags within the user's namespace.

        Returns:
            Number of entries removed.
        """
        return self._service.invalidate([self._key(user_id, tag) for tag in tags])

    def clear(self, user_id: str) -> int:
        """Drop every entry stored for one user."""
        return self._service.invalidate([self._namespace(user_id)])

    @staticmethod
    def _namespace(user_id: str) -> str:
        return f"{USER_PREFIX}:{quote(str(user_id), safe='')}"

    @classmethod
    def _key(cls, user_id: str, key: str) -> str:
        return f"{cls._namespace(user_id)}:{key}"


class CacheService:
    """Domain service exposing the cache to the rest of the client.

    The service itself is the shared view: ``get``/``set``/``invalidate``/
    ``clear`` act on the global namespace used for catalog data. The
    ``user`` attribute is a per-user view over the same store. Keys
    starting with ``user:`` belong to the user view and are not used by
    the shared namespace. Build one CacheService per process and hand it
    to every resource service so that all of them see the same entries.
    """

    def __init__(self, store: ICacheStore[Any], default_ttl: float = 60) -> None:
        """Initialize the cache service.

        Args:
            store: The store holding every entry, shared and per-user.
            default_ttl: TTL in seconds for writes that do not name one.
        """
        self._store = store
        self.default_ttl = default_ttl
        self.user = UserCacheView(self)

        # Statistics
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def shared(self) -> "CacheService":
        """The shared (global) view; the service itself."""
        return self

    @property
    def store(self) -> ICacheStore[Any]:
        """The underlying store, for diagnostics."""
        return self._store

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        with self._stats_lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "total": self._hits + self._misses,
            }

    def get(self, key: str) -> Any | None:
        """Look up a live entry.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None on a miss.
        """
        value = self._store.get(key)
        if value is None:
            with self._stats_lock:
                self._misses += 1
            logger.debug("Cache miss: %s", key)
            return None

        with self._stats_lock:
            self._hits += 1
        logger.debug("Cache hit: %s", key)
        return value

    def set(
        self,
        key: str,
        value: Any,
        config: CacheConfig,
        stale_ttl: float | None = None,
    ) -> None:
        """Store a value.

        Args:
            key: The cache key.
            value: The value to cache.
            config: TTL and tags for the entry.
            stale_ttl: When given, also retain a fallback copy for this
                many seconds, readable through ``get_stale``. The copy
                carries the same tags, so invalidation removes it too.
        """
        self._store.set(key, value, config.ttl, config.tags)
        logger.debug("Cached %s (TTL: %ss, tags: %s)", key, config.ttl, config.tags)

        if stale_ttl:
            self._store.set(STALE_PREFIX + key, value, stale_ttl, config.tags)

    def get_stale(self, key: str) -> Any | None:
        """Return the retained fallback copy for a key, if any."""
        return self._store.get(STALE_PREFIX + key)

    def invalidate(self, tags: list[str]) -> int:
        """Invalidate entries by tags.

        Args:
            tags: Tags to invalidate.

        Returns:
            Number of entries removed.
        """
        count = self._store.invalidate_by_tags(tags)
        logger.debug("Invalidated %d entries for tags %s", count, tags)
        return count

    def clear(self) -> None:
        """Clear every entry in the store."""
        self._store.clear()

    def clear_all(self) -> None:
        """Clear every entry and reset statistics."""
        self._store.clear()
        with self._stats_lock:
            self._hits = 0
            self._misses = 0
