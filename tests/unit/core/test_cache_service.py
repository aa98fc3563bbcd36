"""Tests for CacheService."""

import threading
from typing import Any

from monolite.core.entities.cache_config import CacheConfig
from monolite.core.services.cache_service import CacheService
from monolite.infrastructure.backends.memory import InMemoryCacheStore


class TestCacheService:
    """Tests for the shared view of CacheService."""

    def test_set_and_get(self, cache_service: CacheService) -> None:
        """Test caching and retrieving a value."""
        products = [{"id": 26, "name": "WKR 3.7 Tiger"}]

        cache_service.set("products:list:true:true", products, CacheConfig(ttl=300))

        assert cache_service.get("products:list:true:true") == products

    def test_cache_miss(self, cache_service: CacheService) -> None:
        """Test cache miss returns None."""
        assert cache_service.get("products:list:true:true") is None

    def test_shared_is_service(self, cache_service: CacheService) -> None:
        """Test that the shared view is the service itself."""
        assert cache_service.shared is cache_service

    def test_stats(self, cache_service: CacheService) -> None:
        """Test hit and miss counters."""
        cache_service.get("missing")
        cache_service.set("present", 1, CacheConfig())
        cache_service.get("present")
        cache_service.get("present")

        assert cache_service.stats == {"hits": 2, "misses": 1, "total": 3}

    def test_stats_under_threads(self, cache_service: CacheService) -> None:
        """Test that concurrent lookups are all counted."""
        cache_service.set("present", 1, CacheConfig())

        def read() -> None:
            for _ in range(500):
                cache_service.get("present")
                cache_service.get("missing")

        threads = [threading.Thread(target=read) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert cache_service.stats == {"hits": 4000, "misses": 4000, "total": 8000}

    def test_clear_all_resets_stats(self, cache_service: CacheService) -> None:
        """Test that clear_all empties the store and the counters."""
        cache_service.set("present", 1, CacheConfig())
        cache_service.get("present")

        cache_service.clear_all()

        assert cache_service.stats["total"] == 0
        assert cache_service.store.size() == 0

    def test_invalidate(self, cache_service: CacheService) -> None:
        """Test invalidation through the shared view."""
        cache_service.set("a", 1, CacheConfig(tags=["x"]))
        cache_service.set("b", 2, CacheConfig(tags=["x", "y"]))
        cache_service.set("c", 3, CacheConfig(tags=["z"]))

        assert cache_service.invalidate(["x"]) == 2
        assert cache_service.get("c") == 3

    def test_stale_copy(self, cache_service: CacheService, timer) -> None:
        """Test that the fallback copy outlives the fresh entry."""
        cache_service.set("banners:list", ["b"], CacheConfig(ttl=10), stale_ttl=100)

        timer.advance(50)

        assert cache_service.get("banners:list") is None
        assert cache_service.get_stale("banners:list") == ["b"]

    def test_stale_copy_shares_tags(self, cache_service: CacheService) -> None:
        """Test that invalidation also drops the fallback copy."""
        cache_service.set(
            "banners:list", ["b"], CacheConfig(ttl=10, tags=["banners"]), stale_ttl=100
        )

        cache_service.invalidate(["banners"])

        assert cache_service.get_stale("banners:list") is None

    def test_no_stale_copy_by_default(self, cache_service: CacheService) -> None:
        """Test that plain writes keep no fallback copy."""
        cache_service.set("banners:list", ["b"], CacheConfig(ttl=10))

        assert cache_service.get_stale("banners:list") is None

    def test_services_share_one_store(self, store: InMemoryCacheStore[Any]) -> None:
        """Test that two facades over one store see the same entries."""
        first = CacheService(store)
        second = CacheService(store)

        first.set("products:list:true:true", ["x"], CacheConfig())

        assert second.get("products:list:true:true") == ["x"]


class TestUserCacheView:
    """Tests for the per-user view of CacheService."""

    def test_set_and_get(self, cache_service: CacheService) -> None:
        """Test per-user storage."""
        cache_service.user.set("u1", "cart", {"items": 2}, CacheConfig())

        assert cache_service.user.get("u1", "cart") == {"items": 2}

    def test_users_are_isolated(self, cache_service: CacheService) -> None:
        """Test that users do not see each other's entries."""
        cache_service.user.set("u1", "cart", "one", CacheConfig())

        assert cache_service.user.get("u2", "cart") is None
        assert cache_service.get("cart") is None

    def test_invalidate_only_affects_one_user(
        self, cache_service: CacheService
    ) -> None:
        """Test that one user's invalidation leaves other users alone."""
        cache_service.user.set("u1", "cart", "one", CacheConfig(tags=["cart"]))
        cache_service.user.set("u2", "cart", "two", CacheConfig(tags=["cart"]))
        cache_service.set("cart", "shared", CacheConfig(tags=["cart"]))

        assert cache_service.user.invalidate("u1", ["cart"]) == 1

        assert cache_service.user.get("u1", "cart") is None
        assert cache_service.user.get("u2", "cart") == "two"
        assert cache_service.get("cart") == "shared"

    def test_shared_invalidation_leaves_users(
        self, cache_service: CacheService
    ) -> None:
        """Test that shared tags do not reach user namespaces."""
        cache_service.user.set("u1", "cart", "one", CacheConfig(tags=["cart"]))

        cache_service.invalidate(["cart"])

        assert cache_service.user.get("u1", "cart") == "one"

    def test_clear_user(self, cache_service: CacheService) -> None:
        """Test dropping every entry of one user."""
        cache_service.user.set("u1", "a", 1, CacheConfig())
        cache_service.user.set("u1", "b", 2, CacheConfig())
        cache_service.user.set("u2", "a", 3, CacheConfig())

        assert cache_service.user.clear("u1") == 2
        assert cache_service.user.get("u2", "a") == 3

    def test_shared_visible_to_all_users(self, cache_service: CacheService) -> None:
        """Test that shared data stays readable while user data exists."""
        cache_service.set("banners:list", ["b"], CacheConfig())
        cache_service.user.set("u1", "banners:list", ["mine"], CacheConfig())

        assert cache_service.get("banners:list") == ["b"]
        assert cache_service.user.get("u1", "banners:list") == ["mine"]

    def test_separator_in_user_id_does_not_collide(
        self, cache_service: CacheService
    ) -> None:
        """Test that ids containing ':' cannot reach another user's entries."""
        cache_service.user.set("a:b", "cart", "b's cart", CacheConfig(tags=["cart"]))

        assert cache_service.user.get("a", "b:cart") is None
        assert cache_service.user.invalidate("a", ["b:cart"]) == 0
        assert cache_service.user.clear("a") == 0
        assert cache_service.user.get("a:b", "cart") == "b's cart"

    def test_encoded_user_id_does_not_collide(
        self, cache_service: CacheService
    ) -> None:
        """Test that an id spelled like an encoded one stays separate."""
        cache_service.user.set("a:b", "cart", "first", CacheConfig())
        cache_service.user.set("a%3Ab", "cart", "second", CacheConfig())

        assert cache_service.user.get("a:b", "cart") == "first"
        assert cache_service.user.get("a%3Ab", "cart") == "second"
