"""Pytest configuration for monolite tests."""

import json
from typing import Any

import httpx
import pytest

from monolite.config import ConfigManager
from monolite.core.entities.cache_config import CacheSettings
from monolite.core.services.cache_service import CacheService
from monolite.infrastructure.backends.memory import InMemoryCacheStore
from monolite.infrastructure.http.client import HttpClient

BASE_URL = "https://api.autoxpert.com.co/v2"
LICENSE_KEY = "test-license-key"


class FakeTimer:
    """Manually advanced clock for the cache store."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeApi:
    """Canned responses for httpx.MockTransport, recording every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None
        self._routes: dict[tuple[str, str], tuple[int, Any]] = {}

    def add(self, method: str, path: str, body: Any, status: int = 200) -> None:
        self._routes[(method, f"/v2/{path.strip('/')}/")] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        status, body = self._routes.get(
            (request.method, request.url.path),
            (404, {"message": "Recurso no encontrado"}),
        )
        return httpx.Response(status, json=body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def reset_cache_functions_config():
    """Reset the module-level cache function configuration after each test."""
    import monolite.cache

    original_service = monolite.cache._cache_service

    yield

    monolite.cache._cache_service = original_service


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def store(timer: FakeTimer) -> InMemoryCacheStore[Any]:
    return InMemoryCacheStore(timer=timer)


@pytest.fixture
def cache_service(store: InMemoryCacheStore[Any]) -> CacheService:
    return CacheService(store)


@pytest.fixture
def settings() -> CacheSettings:
    return CacheSettings()


@pytest.fixture
def config_manager() -> ConfigManager:
    return ConfigManager(base_url="https://api.autoxpert.com.co", license_key=LICENSE_KEY)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def http_client(api: FakeApi, config_manager: ConfigManager) -> HttpClient:
    return HttpClient(config_manager, transport=httpx.MockTransport(api.handler))
