"""Module-level key/value cache functions.

These functions operate on a configured CacheService, so they read and
write the same store as the resource services built on that service.

Example:
    client = Monolite()
    configure(client.cache)

    set_cache("products:list:true:true", products, ttl=300, tags=["products"])
    get_cache("products:list:true:true")
    invalidate_cache_by_tag("products")
"""

from typing import Any

from monolite.core.entities.cache_config import CacheConfig
from monolite.core.services.cache_service import CacheService

# Module-level cache service reference
_cache_service: CacheService | None = None


def configure(cache_service: CacheService) -> None:
    """Configure the cache service the functions forward to.

    Must be called before any other function in this module.

    Args:
        cache_service: The cache service instance to use.
    """
    global _cache_service
    _cache_service = cache_service


def get_cache_service() -> CacheService | None:
    """Get the configured cache service.

    Returns:
        The configured cache service, or None if not configured.
    """
    return _cache_service


def set_cache(
    key: str,
    value: Any,
    ttl: float | None = None,
    tags: list[str] | None = None,
) -> None:
    """Store a value in the shared namespace.

    Args:
        key: The cache key.
        value: The value to cache.
        ttl: Time-to-live in seconds. Defaults to the service's
            ``default_ttl``.
        tags: Optional tags for invalidation.
    """
    service = _require()
    if ttl is None:
        ttl = service.default_ttl
    service.set(key, value, CacheConfig(ttl=ttl, tags=list(tags or [])))


def get_cache(key: str) -> Any | None:
    """Return the live value at a key, or None."""
    return _require().get(key)


def clear_cache() -> None:
    """Remove every entry."""
    _require().clear()


def invalidate_cache_by_tag(tag: str) -> int:
    """Remove every entry registered under a tag."""
    return _require().invalidate([tag])


def invalidate_cache_by_tags(tags: list[str]) -> int:
    """Remove every entry registered under any of the tags."""
    return _require().invalidate(tags)


def _require() -> CacheService:
    if _cache_service is None:
        raise RuntimeError("Cache not configured. Call configure() first.")
    return _cache_service
