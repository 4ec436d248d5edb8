"""Domain models for the album catalog."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class Album:
    """Represents a catalog entry."""

    id: int
    title: str
    artist: str
    price: Decimal
    genre: str


class SortField(Enum):
    """Album attributes the catalog can be ordered by."""

    TITLE = "title"
    ARTIST = "artist"
    PRICE = "price"


_SORT_FIELD_ALIASES = {
    "name": SortField.TITLE,
    "title": SortField.TITLE,
    "artist": SortField.ARTIST,
    "price": SortField.PRICE,
}


@dataclass(frozen=True)
class SortSpec:
    """Requested ordering; a missing field means the catalog order is kept."""

    field: SortField | None
    ascending: bool = True

    @classmethod
    def parse(cls, sort_by: str, ascending: bool = True) -> "SortSpec":
        """Resolve a case-insensitive field selector into a sort spec."""
        return cls(field=_SORT_FIELD_ALIASES.get(sort_by.lower()), ascending=ascending)
