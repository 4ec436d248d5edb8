"""HTTP client for a remote albums API."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class AlbumsApiClient(Protocol):
    """Interface for a remote album listing."""

    async def list_albums(self) -> list[dict[str, object]]:
        """Return the raw album listing."""


@dataclass
class HttpxAlbumsApiClient(AlbumsApiClient):
    """HTTPX-backed albums API client."""

    albums_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, albums_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxAlbumsApiClient":
        """Create an albums API client with a managed httpx session."""
        return cls(
            albums_url=albums_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_albums(self) -> list[dict[str, object]]:
        """Fetch the album listing."""
        response = await self.http_client.get(
            self.albums_url, timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
