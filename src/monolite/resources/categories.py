"""Categories resource."""

from monolite.core.entities.catalog import Category
from monolite.resources.base import ResourceService


class CategoriesService(ResourceService):
    """Read access to categories and their subcategories.

    Both reads fall back to the last fetched payload when the API is
    unreachable.
    """

    resource = "categories"

    async def get_categories(self) -> list[Category]:
        url = self._url(self.resource)
        return await self._fetch(
            self._keys.build(self.resource, "list"),
            lambda: self._http.get(url),
            ttl=self._settings.categories_ttl,
            tags=[self.resource, self._tag("list")],
            stale_on_error=True,
        )

    async def get_category_by_id(self, category_id: str) -> Category:
        url = self._url(self.resource, category_id)
        return await self._fetch(
            self._keys.build(self.resource, "detail", category_id),
            lambda: self._http.get(url),
            ttl=self._settings.categories_ttl,
            tags=[self.resource, self._tag("detail"), self._tag(category_id)],
            stale_on_error=True,
        )

    def invalidate(self) -> int:
        """Drop every cached category read."""
        return self._cache.invalidate([self.resource])

    def invalidate_category(self, category_id: str) -> int:
        """Drop cached reads for one category."""
        return self._cache.invalidate([self._tag(category_id)])
