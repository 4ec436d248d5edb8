"""Album query and ordering logic."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from album_catalog.domain.albums import Album, SortField, SortSpec

_SORT_KEYS = {
    SortField.TITLE: lambda album: album.title,
    SortField.ARTIST: lambda album: album.artist,
    SortField.PRICE: lambda album: album.price,
}


class AlbumRepository(Protocol):
    """Read-only source of catalog albums."""

    def list_albums(self) -> list[Album]:
        """Return every album in catalog order."""


def sort_albums(
    albums: Sequence[Album], sort_by: str, ascending: bool = True
) -> list[Album]:
    """Return a new list ordered by the requested field.

    Field names are matched case-insensitively and ``name`` is accepted as a
    synonym for ``title``. An unrecognized field keeps the input order. Text
    fields compare by code point; ``price`` compares numerically. The sort is
    stable in both directions.
    """
    spec = SortSpec.parse(sort_by, ascending)
    if spec.field is None:
        return list(albums)
    return sorted(albums, key=_SORT_KEYS[spec.field], reverse=not spec.ascending)


def find_album_by_id(albums: Sequence[Album], album_id: int) -> Album | None:
    """Return the album with the given id, if present."""
    for album in albums:
        if album.id == album_id:
            return album
    return None


@dataclass
class AlbumService:
    """Application service for catalog queries."""

    repository: AlbumRepository

    def list_albums(self) -> list[Album]:
        """Return the catalog in stored order."""
        return self.repository.list_albums()

    def get_album(self, album_id: int) -> Album | None:
        """Return an album by id, if present."""
        return find_album_by_id(self.repository.list_albums(), album_id)

    def list_sorted(
        self, sort_by: str = "title", ascending: bool = True
    ) -> list[Album]:
        """Return the catalog ordered by the requested field."""
        return sort_albums(self.repository.list_albums(), sort_by, ascending)
