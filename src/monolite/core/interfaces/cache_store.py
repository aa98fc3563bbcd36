"""Cache store interface."""

from typing import Protocol, TypeVar

V = TypeVar("V")


class ICacheStore(Protocol[V]):
    """Contract for cache storage.

    Stores are synchronous: lookups and writes happen around the awaited
    HTTP call, never instead of it. Every operation is total and raises
    nothing.
    """

    def get(self, key: str) -> V | None:
        """Retrieve a cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    def set(
        self,
        key: str,
        value: V,
        ttl: float,
        tags: list[str] | None = None,
    ) -> None:
        """Store a value, replacing any existing entry at the key.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Time-to-live in seconds.
            tags: Optional tags to register the key under.
        """
        ...

    def invalidate_by_tag(self, tag: str) -> int:
        """Remove every entry registered under a tag.

        Args:
            tag: The tag to invalidate.

        Returns:
            Number of entries removed.
        """
        ...

    def invalidate_by_tags(self, tags: list[str]) -> int:
        """Invalidate each tag in turn.

        Args:
            tags: Tags to invalidate.

        Returns:
            Number of entries removed.
        """
        ...

    def clear(self) -> None:
        """Remove all entries and tag indexes."""
        ...

    def size(self) -> int:
        """Return the number of live entries."""
        ...

    def keys(self) -> list[str]:
        """Return the keys of live entries."""
        ...
