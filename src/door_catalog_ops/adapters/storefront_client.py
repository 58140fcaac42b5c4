"""Storefront HTTP API client."""

import json
from dataclasses import dataclass
from typing import Protocol

import httpx

from door_catalog_ops.domain.errors import ApiResponseError

COMPLETE_DATA_PATH = "/api/catalog/doors/complete-data"
COMPLETE_DATA_REFRESH_PATH = "/api/catalog/doors/complete-data/refresh"


class StorefrontClient(Protocol):
    """Interface for storefront API interactions."""

    async def get_complete_data(self) -> dict[str, object]:
        """Fetch the door configurator payload."""

    async def refresh_complete_data(self) -> object:
        """Clear the configurator cache and return the response body."""

    async def head(self, url: str) -> tuple[int, str | None]:
        """Issue a HEAD request and return status code and content type."""


@dataclass
class HttpxStorefrontClient(StorefrontClient):
    """HTTPX-backed storefront client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 30.0) -> "HttpxStorefrontClient":
        """Create a storefront client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(follow_redirects=True),
            timeout=timeout,
        )

    async def get_complete_data(self) -> dict[str, object]:
        """Fetch the door configurator payload bypassing caches."""
        response = await self.http_client.get(
            f"{self.base_url}{COMPLETE_DATA_PATH}",
            headers={"Cache-Control": "no-store"},
            timeout=self.timeout,
        )
        _ensure_success(response)
        return response.json()

    async def refresh_complete_data(self) -> object:
        """Trigger the complete-data cache refresh endpoint."""
        response = await self.http_client.get(
            f"{self.base_url}{COMPLETE_DATA_REFRESH_PATH}",
            timeout=self.timeout,
        )
        _ensure_success(response)
        try:
            return response.json()
        except json.JSONDecodeError:
            return response.text

    async def head(self, url: str) -> tuple[int, str | None]:
        """Probe a URL with HEAD."""
        response = await self.http_client.head(url, timeout=self.timeout)
        return response.status_code, response.headers.get("content-type")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _ensure_success(response: httpx.Response) -> None:
    if not response.is_success:
        raise ApiResponseError(response.status_code, response.text)
