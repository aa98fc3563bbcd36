"""Cache entry entity."""

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """Immutable cache entry value object.

    Holds a cached value together with the clock reading at which it was
    stored, its time-to-live in seconds and the tags it was written under.
    Times are expressed in the store's timer units (seconds), not wall-clock
    datetimes, so that tests can drive expiry with a fake timer.
    """

    key: str
    value: V
    stored_at: float
    ttl: float
    tags: tuple[str, ...] = ()

    @property
    def expires_at(self) -> float:
        """Timer reading at which this entry stops being valid."""
        return self.stored_at + self.ttl

    def is_expired(self, now: float) -> bool:
        """Check if the entry has expired at the given timer reading.

        Args:
            now: Current timer reading in seconds.

        Returns:
            True once ``now - stored_at`` reaches the TTL.
        """
        return not (now < self.expires_at)

    @classmethod
    def create(
        cls,
        key: str,
        value: V,
        ttl: float,
        now: float,
        tags: list[str] | tuple[str, ...] | None = None,
    ) -> "CacheEntry[V]":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live in seconds.
            now: Timer reading at write time.
            tags: Optional tags for invalidation. Duplicates are dropped,
                first occurrence wins.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            stored_at=now,
            ttl=float(ttl),
            tags=tuple(dict.fromkeys(tags)) if tags else (),
        )
