"""Core domain layer for monolite."""

from monolite.core.entities import CacheConfig, CacheEntry, CacheSettings
from monolite.core.interfaces import ICacheStore, IHttpClient, IKeyBuilder
from monolite.core.services import CacheService, UserCacheView

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheSettings",
    # Interfaces
    "ICacheStore",
    "IHttpClient",
    "IKeyBuilder",
    # Services
    "CacheService",
    "UserCacheView",
]
