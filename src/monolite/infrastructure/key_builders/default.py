"""Default key builder implementation."""

from collections.abc import Iterable
from typing import Any


class CatalogKeyBuilder:
    """Key builder producing readable, colon-delimited catalog keys.

    Keys look like ``products:detail:42:true:true``. Parameters are
    serialized positionally so callers control which fields appear and in
    which order. Booleans become ``true``/``false``; lists and tuples are
    joined with ``,`` in the order given and are never sorted, so
    ``["A", "B"]`` and ``["B", "A"]`` produce different keys.
    """

    def __init__(self, separator: str = ":", list_separator: str = ",") -> None:
        """Initialize the key builder.

        Args:
            separator: Delimiter between key fields.
            list_separator: Delimiter between items of a list field.
        """
        self._separator = separator
        self._list_separator = list_separator

    def build(self, resource: str, operation: str, *params: Any) -> str:
        """Build the key for a read operation.

        Args:
            resource: Resource namespace (e.g. ``products``).
            operation: Operation name (e.g. ``list``, ``search``).
            *params: Response-affecting parameters, in key order.

        Returns:
            The cache key string.
        """
        parts = [resource, operation]
        parts.extend(self.serialize(param) for param in params)
        return self._separator.join(parts)

    def build_nested(self, resource: str, identifier: Any, operation: str) -> str:
        """Build a key for an operation scoped under one entity.

        Used for sub-resources such as ``products:42:variations``.

        Args:
            resource: Resource namespace.
            identifier: Entity identifier.
            operation: Sub-resource name.

        Returns:
            The cache key string.
        """
        return self._separator.join(
            [resource, self.serialize(identifier), operation]
        )

    def tag(self, resource: str, *parts: Any) -> str:
        """Build a tag in the same format as keys.

        Args:
            resource: Resource namespace.
            *parts: Further tag fields (operation, identifier, query).

        Returns:
            The tag string.
        """
        return self._separator.join(
            [resource, *(self.serialize(part) for part in parts)]
        )

    def serialize(self, value: Any) -> str:
        """Serialize a single key field.

        Args:
            value: The parameter value.

        Returns:
            The string form used inside keys.
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "none"
        if isinstance(value, str):
            return value
        if isinstance(value, Iterable):
            return self._list_separator.join(self.serialize(item) for item in value)
        return str(value)
