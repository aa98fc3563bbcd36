"""HTTP client interface."""

from typing import Any, Protocol

import httpx


class IHttpClient(Protocol):
    """Contract for the HTTP façade used by resource services.

    Implementations raise ``httpx.HTTPStatusError`` when the API answered
    with an error status and ``httpx.RequestError`` when no response was
    received at all.
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue a GET request.

        Args:
            url: Absolute URL.
            params: Optional query parameters, appended in insertion order.

        Returns:
            The successful response.
        """
        ...

    async def post(self, url: str, json: Any) -> httpx.Response:
        """Issue a POST request with a JSON body.

        Args:
            url: Absolute URL.
            json: JSON-serializable request body.

        Returns:
            The successful response.
        """
        ...
