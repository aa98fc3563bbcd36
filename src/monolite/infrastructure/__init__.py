"""Infrastructure layer implementations for monolite."""

from monolite.infrastructure.backends import InMemoryCacheStore
from monolite.infrastructure.http import HttpClient, build_url
from monolite.infrastructure.key_builders import CatalogKeyBuilder

__all__ = [
    "InMemoryCacheStore",
    "CatalogKeyBuilder",
    "HttpClient",
    "build_url",
]
