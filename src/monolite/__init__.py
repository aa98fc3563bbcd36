"""monolite - client for the catalog API with in-memory caching.

Wraps the banners, categories and products endpoints behind async
service objects. Every read is cached in a process-wide in-memory store
with per-entry TTLs and tag-based invalidation.

Example:
    from monolite import ConfigManager, Monolite

    config = ConfigManager(license_key="my-license-key")

    async with Monolite(config) as client:
        # First call hits the API, the second is served from cache
        products = await client.products.get_products()
        products = await client.products.get_products()

        results = await client.products.search_products("tiger", page=1, limit=4)

        # Drop cached reads of product 26 after it changes
        client.products.invalidate_product(26)

Free-function cache access over the same store:
    from monolite import cache

    cache.configure(client.cache)
    cache.set_cache("banners:list", banners, ttl=300, tags=["banners"])
"""

from monolite.client import Monolite
from monolite.config import ClientConfig, ConfigManager
from monolite.core.entities import (
    Banner,
    CacheConfig,
    CacheEntry,
    CacheSettings,
    Category,
    Pagination,
    Product,
    ProductFeatures,
    ProductFilterBySkuResponse,
    ProductSearchResponse,
    ProductSearchResult,
    ProductVariation,
    Subcategory,
)
from monolite.core.interfaces import ICacheStore, IHttpClient, IKeyBuilder
from monolite.core.services import CacheService, UserCacheView
from monolite.exceptions import (
    ConfigurationError,
    MonoliteError,
    NetworkError,
    ServerError,
)
from monolite.infrastructure import (
    CatalogKeyBuilder,
    HttpClient,
    InMemoryCacheStore,
)
from monolite.resources import (
    BannersService,
    CategoriesService,
    ProductsService,
    ResourceService,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "Monolite",
    "ClientConfig",
    "ConfigManager",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheSettings",
    # Catalog payloads
    "Banner",
    "Category",
    "Subcategory",
    "Product",
    "ProductFeatures",
    "ProductVariation",
    "ProductSearchResult",
    "Pagination",
    "ProductSearchResponse",
    "ProductFilterBySkuResponse",
    # Core interfaces
    "ICacheStore",
    "IHttpClient",
    "IKeyBuilder",
    # Core services
    "CacheService",
    "UserCacheView",
    # Infrastructure implementations
    "InMemoryCacheStore",
    "CatalogKeyBuilder",
    "HttpClient",
    # Resource services
    "ResourceService",
    "BannersService",
    "CategoriesService",
    "ProductsService",
    # Errors
    "MonoliteError",
    "ServerError",
    "NetworkError",
    "ConfigurationError",
]
