"""Tests for HttpClient."""

import httpx
import pytest

from monolite.config import ConfigManager
from monolite.infrastructure.http.client import HttpClient, build_url


class TestBuildUrl:
    """Tests for build_url."""

    def test_adds_trailing_slash(self) -> None:
        """Test that endpoint URLs end with a slash."""
        assert build_url("https://api.example.com/v2", "banners") == (
            "https://api.example.com/v2/banners/"
        )

    def test_normalizes_slashes(self) -> None:
        """Test that duplicate slashes are collapsed at the joints."""
        assert build_url("https://api.example.com/v2/", "/products/26/") == (
            "https://api.example.com/v2/products/26/"
        )


class TestHttpClient:
    """Tests for HttpClient."""

    async def test_get_attaches_license_key(self, api, http_client: HttpClient) -> None:
        """Test that the license key header is sent."""
        api.add("GET", "banners", {"data": [], "message": "ok"})

        response = await http_client.get("https://api.autoxpert.com.co/v2/banners/")

        assert response.json() == {"data": [], "message": "ok"}
        assert api.requests[0].headers["X-License-Key"] == "test-license-key"

    async def test_license_key_read_per_request(
        self, api, http_client: HttpClient, config_manager: ConfigManager
    ) -> None:
        """Test that key changes apply to an existing client."""
        api.add("GET", "banners", {"data": []})

        config_manager.set_license_key("rotated-key")
        await http_client.get("https://api.autoxpert.com.co/v2/banners/")

        assert api.requests[0].headers["X-License-Key"] == "rotated-key"

    async def test_no_header_without_key(self, api) -> None:
        """Test that no header is sent when no key is configured."""
        api.add("GET", "banners", {"data": []})
        client = HttpClient(ConfigManager(), transport=httpx.MockTransport(api.handler))

        await client.get("https://api.autoxpert.com.co/v2/banners/")

        assert "X-License-Key" not in api.requests[0].headers

    async def test_get_with_params(self, api, http_client: HttpClient) -> None:
        """Test query parameters keep insertion order."""
        api.add("GET", "products/search", {"data": {}})

        await http_client.get(
            "https://api.autoxpert.com.co/v2/products/search/",
            params={"q": "cami", "page": 1, "limit": 4},
        )

        assert api.last_url == (
            "https://api.autoxpert.com.co/v2/products/search/?q=cami&page=1&limit=4"
        )

    async def test_post_json(self, api, http_client: HttpClient) -> None:
        """Test POST sends a JSON body."""
        api.add("POST", "products/filter/by-sku", {"data": {}})

        await http_client.post(
            "https://api.autoxpert.com.co/v2/products/filter/by-sku/",
            json={"skus": ["A"]},
        )

        assert api.last_json == {"skus": ["A"]}
        assert api.requests[0].headers["Content-Type"] == "application/json"

    async def test_error_status_raises(self, http_client: HttpClient) -> None:
        """Test that error statuses raise HTTPStatusError."""
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await http_client.get("https://api.autoxpert.com.co/v2/unknown/")

        assert exc_info.value.response.status_code == 404

    async def test_transport_failure_raises(self, api, http_client: HttpClient) -> None:
        """Test that transport failures raise RequestError."""
        api.fail_with = httpx.ConnectError("Connection refused")

        with pytest.raises(httpx.RequestError):
            await http_client.get("https://api.autoxpert.com.co/v2/banners/")

    async def test_async_context_manager(self, api, config_manager) -> None:
        """Test closing through async with."""
        async with HttpClient(
            config_manager, transport=httpx.MockTransport(api.handler)
        ) as client:
            assert isinstance(client, HttpClient)
