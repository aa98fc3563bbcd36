"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys and tags for catalog reads.

    Key builders must be deterministic: identical requests map to the
    same key and any response-affecting difference maps to a different
    key.
    """

    def build(self, resource: str, operation: str, *params: Any) -> str:
        """Build the cache key for one read operation.

        Args:
            resource: Resource namespace (e.g. ``products``).
            operation: Operation name (e.g. ``detail``).
            *params: Response-affecting parameters, in key order.

        Returns:
            A deterministic string key.
        """
        ...

    def build_nested(self, resource: str, identifier: Any, operation: str) -> str:
        """Build the key for a sub-resource of one entity."""
        ...

    def tag(self, resource: str, *parts: Any) -> str:
        """Build an invalidation tag."""
        ...

    def serialize(self, value: Any) -> str:
        """Serialize a single key field."""
        ...
