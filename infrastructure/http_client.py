"""Shared async HTTP client with configurable timeout."""

from typing import Any, Optional

import httpx

from config import ClientSettings


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a configurable timeout.

    ``timeout=None`` disables the client-side timeout entirely. ``transport``
    lets tests substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: Optional[float] = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HttpClient":
        return cls(timeout=settings.http_timeout, transport=transport)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
