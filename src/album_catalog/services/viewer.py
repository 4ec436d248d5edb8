"""Album listing as seen by a remote catalog consumer."""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import httpx

from album_catalog.adapters.albums_api_client import AlbumsApiClient
from album_catalog.domain.albums import Album

_logger = logging.getLogger(__name__)


@dataclass
class AlbumViewerService:
    """Load albums from a remote albums API."""

    client: AlbumsApiClient

    async def load_albums(self) -> list[Album]:
        """Return the remote listing, or an empty list when the fetch fails."""
        try:
            payload = await self.client.list_albums()
            return [_parse_album(item) for item in payload]
        except (
            httpx.HTTPError,
            ValueError,
            AttributeError,
            KeyError,
            TypeError,
            InvalidOperation,
        ):
            _logger.exception("Failed to load albums from the albums API")
            return []


def _parse_album(item: dict[str, object]) -> Album:
    """Build an album, matching property names case-insensitively."""
    fields = {str(key).lower(): value for key, value in item.items()}
    price = Decimal(str(fields.get("price", 0)))
    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid price {price} for album {fields.get('id')}")
    return Album(
        id=int(fields["id"]),
        title=_text(fields, "title"),
        artist=_text(fields, "artist"),
        price=price,
        genre=_text(fields, "genre"),
    )


def _text(fields: dict[str, object], name: str) -> str:
    value = fields.get(name, "")
    if not isinstance(value, str):
        raise TypeError(f"album {name} must be text, got {type(value).__name__}")
    return value
