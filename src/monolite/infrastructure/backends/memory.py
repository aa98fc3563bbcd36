"""In-memory cache store implementation."""

import math
import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from cachetools import TLRUCache

from monolite.core.entities.cache_entry import CacheEntry

V = TypeVar("V")


def _time_to_use(key: str, entry: CacheEntry[V], now: float) -> float:
    return entry.expires_at


class InMemoryCacheStore(Generic[V]):
    """In-memory cache store with per-entry TTL and tag invalidation.

    Suitable for single-process deployments. Uses cachetools' TLRUCache
    so every entry carries its own expiry; the cache is unbounded in size.
    Expired entries are purged at access time, never by a background
    thread. A single re-entrant lock serializes all operations so the
    store can be shared between threads.

    Every operation freezes the timer for its whole duration, so the
    purge, the write and TLRUCache's own internal expiry all see the same
    clock reading and the tag index never loses track of an entry.
    """

    def __init__(self, timer: Callable[[], float] = time.monotonic) -> None:
        """Initialize the in-memory cache store.

        Args:
            timer: Clock returning seconds. Tests inject a fake one to
                move time forward.
        """
        self._lock = threading.RLock()
        self._cache: TLRUCache[str, CacheEntry[V]] = TLRUCache(
            maxsize=math.inf,
            ttu=_time_to_use,
            timer=timer,
        )
        # Track tags separately for invalidation
        self._tags: dict[str, set[str]] = {}

    def get(self, key: str) -> V | None:
        """Retrieve a cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        with self._lock, self._cache.timer:
            self._purge_expired()
            entry = self._cache.get(key)
            return entry.value if entry is not None else None

    def set(
        self,
        key: str,
        value: V,
        ttl: float,
        tags: list[str] | None = None,
    ) -> None:
        """Store a value, replacing any existing entry at the key.

        The key leaves the tag indexes of the entry it replaces. An entry
        with a non-positive TTL is already expired and is not kept.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Time-to-live in seconds.
            tags: Optional tags to register the key under.
        """
        with self._lock, self._cache.timer as now:
            self._purge_expired()
            self._discard(key)

            entry = CacheEntry.create(
                key=key,
                value=value,
                ttl=ttl,
                now=now,
                tags=tags,
            )
            self._cache[key] = entry
            if key not in self._cache:
                return

            for tag in entry.tags:
                self._tags.setdefault(tag, set()).add(key)

    def invalidate_by_tag(self, tag: str) -> int:
        """Remove every entry registered under a tag.

        Unknown tags are a no-op.

        Args:
            tag: The tag to invalidate.

        Returns:
            Number of entries removed.
        """
        with self._lock, self._cache.timer:
            self._purge_expired()
            keys = self._tags.pop(tag, None)
            if not keys:
                return 0

            count = 0
            for key in keys:
                if self._discard(key):
                    count += 1
            return count

    def invalidate_by_tags(self, tags: list[str]) -> int:
        """Invalidate each tag in turn.

        Each tag's invalidation is independent; there is no atomicity
        across the list.

        Args:
            tags: Tags to invalidate.

        Returns:
            Number of entries removed.
        """
        return sum(self.invalidate_by_tag(tag) for tag in tags)

    def clear(self) -> None:
        """Remove all entries and tag indexes."""
        with self._lock:
            self._cache.clear()
            self._tags.clear()

    def size(self) -> int:
        """Return the number of live entries."""
        with self._lock, self._cache.timer:
            self._purge_expired()
            return len(self._cache)

    def keys(self) -> list[str]:
        """Return the keys of live entries."""
        with self._lock, self._cache.timer:
            self._purge_expired()
            return list(self._cache)

    def __len__(self) -> int:
        """Return the number of live entries."""
        return self.size()

    def _discard(self, key: str) -> bool:
        entry = self._cache.pop(key, None)
        if entry is None:
            return False
        self._unregister(key, entry.tags)
        return True

    def _purge_expired(self) -> None:
        for key, entry in self._cache.expire():
            self._unregister(key, entry.tags)

    def _unregister(self, key: str, tags: tuple[str, ...]) -> None:
        for tag in tags:
            keys = self._tags.get(tag)
            if keys is None:
                continue
            keys.discard(key)
            if not keys:
                del self._tags[tag]
