"""Domain entities for monolite."""

from monolite.core.entities.cache_config import CacheConfig, CacheSettings
from monolite.core.entities.cache_entry import CacheEntry
from monolite.core.entities.catalog import (
    Banner,
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

__all__ = [
    "CacheEntry",
    "CacheConfig",
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
]
