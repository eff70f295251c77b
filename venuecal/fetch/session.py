"""Factories for httpx-backed upstream sessions."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator, Dict, Optional
from urllib.parse import urlparse

import httpx


class FetchSession:
    """An upstream client bound to the platform base URL and a timeout."""

    def __init__(self, client: httpx.AsyncClient, *, base_url: str, timeout: float) -> None:
        self._client = client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def host(self) -> str:
        return urlparse(self.base_url).netloc

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, url: str, *, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        """Issue a single GET with the session timeout."""
        return await self._client.get(url, params=params, timeout=self.timeout)


@contextlib.asynccontextmanager
async def create_fetch_session(
    *,
    base_url: str,
    user_agent: str,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[FetchSession]:
    """Yield a configured `FetchSession` for the duration of the context."""
    headers = {"User-Agent": user_agent}
    async with httpx.AsyncClient(headers=headers, timeout=timeout, transport=transport) as client:
        yield FetchSession(client, base_url=base_url, timeout=timeout)
