"""Products resource."""

from collections.abc import Sequence

from monolite.core.entities.catalog import (
    Product,
    ProductFilterBySkuResponse,
    ProductSearchResponse,
    ProductVariation,
)
from monolite.resources.base import ResourceService


class ProductsService(ResourceService):
    """Read access to products, product search and variations.

    List and detail reads fall back to the last fetched payload when the
    API is unreachable or failing. Search, SKU filtering and variations
    never do.
    """

    resource = "products"

    async def get_products(
        self,
        include_variations: bool = True,
        group_attributes: bool = True,
    ) -> list[Product]:
        url = self._url(self.resource)
        params = self._flags(include_variations, group_attributes)
        return await self._fetch(
            self._keys.build(self.resource, "list", include_variations, group_attributes),
            lambda: self._http.get(url, params=params),
            ttl=self._settings.products_ttl,
            tags=[self.resource, self._tag("list")],
            stale_on_error=True,
        )

    async def get_product_by_id(
        self,
        product_id: int,
        include_variations: bool = True,
        group_attributes: bool = True,
    ) -> Product:
        url = self._url(self.resource, product_id)
        params = self._flags(include_variations, group_attributes)
        return await self._fetch(
            self._keys.build(
                self.resource, "detail", product_id, include_variations, group_attributes
            ),
            lambda: self._http.get(url, params=params),
            ttl=self._settings.products_ttl,
            tags=[self.resource, self._tag("detail"), self._tag(product_id)],
            stale_on_error=True,
        )

    async def search_products(
        self,
        query: str,
        page: int = 1,
        limit: int = 10,
    ) -> ProductSearchResponse:
        """Full-text product search.

        Returns the whole response body, pagination included.
        """
        url = self._url(self.resource, "search")
        params = {"q": query, "page": page, "limit": limit}
        return await self._fetch(
            self._keys.build(self.resource, "search", query, page, limit),
            lambda: self._http.get(url, params=params),
            ttl=self._settings.search_ttl,
            tags=[self.resource, self._tag("search"), self._tag("search", query)],
            unwrap=False,
        )

    async def filter_products_by_sku(
        self,
        skus: Sequence[str],
        page: int = 1,
        limit: int = 10,
        include_variations: bool = True,
    ) -> ProductFilterBySkuResponse:
        """Fetch products by SKU.

        SKU order is part of the cache key: ``["A", "B"]`` and
        ``["B", "A"]`` are cached separately.
        """
        url = self._url(self.resource, "filter", "by-sku")
        body = {
            "skus": list(skus),
            "page": page,
            "limit": limit,
            "include_variations": include_variations,
        }
        return await self._fetch(
            self._keys.build(self.resource, "filter", skus, page, limit, include_variations),
            lambda: self._http.post(url, json=body),
            ttl=self._settings.search_ttl,
            tags=[self.resource, self._tag("filter")],
            unwrap=False,
        )

    async def get_product_variations(self, product_id: int) -> list[ProductVariation]:
        url = self._url(self.resource, product_id, "variations")
        return await self._fetch(
            self._keys.build_nested(self.resource, product_id, "variations"),
            lambda: self._http.get(url),
            ttl=self._settings.variations_ttl,
            tags=[self.resource, self._tag("variations"), self._tag(product_id)],
        )

    def invalidate(self) -> int:
        """Drop every cached product read."""
        return self._cache.invalidate([self.resource])

    def invalidate_product(self, product_id: int) -> int:
        """Drop the cached detail and variations of one product."""
        return self._cache.invalidate([self._tag(product_id)])

    def invalidate_search(self, query: str) -> int:
        """Drop every cached page of one search query."""
        return self._cache.invalidate([self._tag("search", query)])

    def _flags(self, include_variations: bool, group_attributes: bool) -> dict[str, str]:
        return {
            "include_variations": self._keys.serialize(include_variations),
            "group_attributes": self._keys.serialize(group_attributes),
        }
