# ABOUTME: The HTTP GET capability the lookup clients depend on, and the factory for the real client.
# ABOUTME: httpx.AsyncClient satisfies HttpGetter; tests substitute an in-memory double.

from typing import Protocol

import httpx


class HttpGetter(Protocol):
    """Anything that can issue a GET for a URL and hand back an httpx.Response."""

    async def get(self, url: str) -> httpx.Response: ...


def create_http_client(timeout: float = 5.0) -> httpx.AsyncClient:
    """Create the shared httpx client used for every outbound lookup.

    No retry transport is installed: a single failed call fails the request.
    """
    return httpx.AsyncClient(timeout=timeout)
