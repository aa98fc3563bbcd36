"""HTTP façade over httpx."""

import logging
from typing import Any

import httpx

from monolite.config import LICENSE_KEY_HEADER, ConfigManager

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def build_url(base_url: str, path: str) -> str:
    """Join the base URL and an endpoint path, ending with a slash.

    Args:
        base_url: Versioned API root.
        path: Endpoint path such as ``products/42``.

    Returns:
        The absolute URL with a trailing slash.
    """
    path = path.strip("/")
    return f"{base_url.rstrip('/')}/{path}/"


class HttpClient:
    """Async HTTP client that authenticates every request.

    The license key is read from the ``ConfigManager`` at request time
    by a request event hook, so key changes apply immediately. Error
    statuses are raised as ``httpx.HTTPStatusError``; transport failures
    surface as ``httpx.RequestError``. No retries are attempted.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            config_manager: Source of the license key.
            timeout: Request timeout in seconds.
            transport: Optional transport, e.g. ``httpx.MockTransport``.
            client: Optional pre-built client. Its event hooks are
                extended with the license-key hook.
        """
        self._config_manager = config_manager
        if client is None:
            client = httpx.AsyncClient(
                timeout=timeout,
                headers={"Content-Type": "application/json"},
                transport=transport,
            )
        client.event_hooks["request"].append(self._attach_license_key)
        client.event_hooks["response"].append(self._log_response)
        self._client = client

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue a GET request and raise on error status."""
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response

    async def post(self, url: str, json: Any) -> httpx.Response:
        """Issue a POST request with a JSON body and raise on error status."""
        response = await self._client.post(url, json=json)
        response.raise_for_status()
        return response

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _attach_license_key(self, request: httpx.Request) -> None:
        license_key = self._config_manager.get_config().license_key
        if license_key:
            request.headers[LICENSE_KEY_HEADER] = license_key

    async def _log_response(self, response: httpx.Response) -> None:
        request = response.request
        logger.debug(
            "%s %s -> %s", request.method, request.url, response.status_code
        )
