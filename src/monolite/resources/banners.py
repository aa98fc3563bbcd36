"""Banners resource."""

from monolite.core.entities.catalog import Banner
from monolite.resources.base import ResourceService


class BannersService(ResourceService):
    """Read access to promotional banners."""

    resource = "banners"

    async def get_banners(self) -> list[Banner]:
        """Fetch all banners.

        Falls back to the last fetched list when the API is unreachable.
        """
        url = self._url(self.resource)
        return await self._fetch(
            self._keys.build(self.resource, "list"),
            lambda: self._http.get(url),
            ttl=self._settings.banners_ttl,
            tags=[self.resource, self._tag("list")],
            stale_on_error=True,
        )

    def invalidate(self) -> int:
        """Drop every cached banner read."""
        return self._cache.invalidate([self.resource])
