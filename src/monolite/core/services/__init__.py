"""Domain services for monolite."""

from monolite.core.services.cache_service import CacheService, UserCacheView

__all__ = [
    "CacheService",
    "UserCacheView",
]
