"""Static album catalog shipped with the service."""

from dataclasses import dataclass, field
from decimal import Decimal

from album_catalog.domain.albums import Album
from album_catalog.services.albums import AlbumRepository


def default_albums() -> list[Album]:
    """Return the bundled catalog."""
    return [
        Album(
            id=1,
            title="You, Me and an App Id",
            artist="Daprize",
            price=Decimal("10.99"),
            genre="Pop",
        ),
        Album(
            id=2,
            title="Seven Revision Army",
            artist="The Blue-Green Stripes",
            price=Decimal("13.99"),
            genre="Rock",
        ),
        Album(
            id=3,
            title="Scale It Up",
            artist="KEDA Club",
            price=Decimal("13.99"),
            genre="Electronic",
        ),
        Album(
            id=4,
            title="Lost in Translation",
            artist="MegaDNS",
            price=Decimal("12.99"),
            genre="Indie",
        ),
        Album(
            id=5,
            title="Lock Down Your Love",
            artist="V is for VNET",
            price=Decimal("12.99"),
            genre="Pop",
        ),
        Album(
            id=6,
            title="Sweet Container O' Mine",
            artist="Guns N Probeses",
            price=Decimal("14.99"),
            genre="Rock",
        ),
    ]


@dataclass
class FixtureAlbumRepository(AlbumRepository):
    """Album repository backed by an immutable in-process list."""

    albums: tuple[Album, ...] = field(default_factory=lambda: tuple(default_albums()))

    def list_albums(self) -> list[Album]:
        """Return a fresh list so callers cannot reorder the catalog."""
        return list(self.albums)
