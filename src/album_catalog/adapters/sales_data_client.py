"""HTTP client for album sales data."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SalesDataClient(Protocol):
    """Interface for fetching raw sales records."""

    async def fetch_sales(self, location: str) -> list[dict[str, object]]:
        """Fetch raw sales records from the given location."""


@dataclass
class HttpxSalesDataClient(SalesDataClient):
    """HTTPX-backed sales data client."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(cls, timeout_seconds: float = 10.0) -> "HttpxSalesDataClient":
        """Create a sales data client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), timeout_seconds=timeout_seconds)

    async def fetch_sales(self, location: str) -> list[dict[str, object]]:
        """Fetch a JSON array of sales records."""
        response = await self.http_client.get(location, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
