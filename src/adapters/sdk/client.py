"""SDK client entry point.

`Client` owns the base URL and the HTTP session, and hands out one fresh builder
per operation call.
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client
from adapters.sdk.builder import KeyGet
from core.config import AppSettings


class Client:
    """Client for the key API."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._baseurl = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or build_async_client(settings)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "Client":
        return cls(settings.base_url, settings=settings)

    @property
    def baseurl(self) -> str:
        return self._baseurl

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    def key_get(self) -> KeyGet:
        """Start a `GET /key` request."""

        return KeyGet(self)

    async def aclose(self) -> None:
        """Close the HTTP session if this client created it."""

        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
