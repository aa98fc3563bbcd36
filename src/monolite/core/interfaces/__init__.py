"""Core interfaces (Protocol classes) for monolite."""

from monolite.core.interfaces.cache_store import ICacheStore
from monolite.core.interfaces.http_client import IHttpClient
from monolite.core.interfaces.key_builder import IKeyBuilder

__all__ = [
    "ICacheStore",
    "IHttpClient",
    "IKeyBuilder",
]
