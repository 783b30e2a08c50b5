"""Base async HTTP client."""

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


class BaseAPIClient:
    """
    Async HTTP client base using httpx.AsyncClient.
    Features: configurable headers, per-call timeout, injectable transport.

    No retries: a failed call ends the lookup that issued it.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self._headers = headers or {}
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request, raising ``httpx.HTTPStatusError`` on non-2xx."""
        client = await self._get_client()

        logger.debug("API request", method=method, path=path, params=params)

        response = await client.request(method, path, params=params)

        logger.debug(
            "API response",
            method=method,
            path=path,
            status=response.status_code,
        )

        response.raise_for_status()
        return response

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self._request("GET", path, params=params)
        return response.json()

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
