"""Cache key builders."""

from monolite.infrastructure.key_builders.default import CatalogKeyBuilder

__all__ = ["CatalogKeyBuilder"]
