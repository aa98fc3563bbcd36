"""Client entry point wiring config, HTTP, cache and resource services."""

from typing import Any

from monolite.config import ConfigManager
from monolite.core.entities.cache_config import CacheSettings
from monolite.core.interfaces.cache_store import ICacheStore
from monolite.core.interfaces.http_client import IHttpClient
from monolite.core.services.cache_service import CacheService
from monolite.infrastructure.backends.memory import InMemoryCacheStore
from monolite.infrastructure.http.client import HttpClient
from monolite.resources.banners import BannersService
from monolite.resources.categories import CategoriesService
from monolite.resources.products import ProductsService


class Monolite:
    """Catalog API client.

    Builds one cache store and one CacheService and passes them to every
    resource service, so all services share cached entries. Create one
    client per process and keep it for the process lifetime.

    Example:
        async with Monolite(ConfigManager(license_key="...")) as client:
            products = await client.products.get_products()
            banners = await client.banners.get_banners()
    """

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        http_client: IHttpClient | None = None,
        cache_store: ICacheStore[Any] | None = None,
        settings: CacheSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config_manager: Base URL and license key. Defaults to the
                public API without a key.
            http_client: HTTP façade. Defaults to an httpx-backed client.
            cache_store: Store for cached payloads. Defaults to a new
                in-memory store.
            settings: Cache TTLs and fallback behavior.
        """
        self.config = config_manager or ConfigManager()
        self.settings = settings or CacheSettings()
        self._http = http_client or HttpClient(self.config)
        self.cache = CacheService(
            cache_store or InMemoryCacheStore(),
            default_ttl=self.settings.default_ttl,
        )

        self.banners = BannersService(self._http, self.config, self.cache, self.settings)
        self.categories = CategoriesService(self._http, self.config, self.cache, self.settings)
        self.products = ProductsService(self._http, self.config, self.cache, self.settings)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Monolite":
        """Build a client configured from environment variables."""
        return cls(config_manager=ConfigManager.from_env(), **kwargs)

    async def aclose(self) -> None:
        """Close the HTTP client if it supports closing."""
        close = getattr(self._http, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "Monolite":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
