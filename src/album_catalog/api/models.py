"""Pydantic models for API responses."""

import datetime

from pydantic import BaseModel

from album_catalog.domain.albums import Album


class AlbumResponse(BaseModel):
    """Album as exposed over HTTP."""

    id: int
    title: str
    artist: str
    price: float
    genre: str

    @classmethod
    def from_album(cls, album: Album) -> "AlbumResponse":
        return cls(
            id=album.id,
            title=album.title,
            artist=album.artist,
            price=float(album.price),
            genre=album.genre,
        )


class DateValidationResponse(BaseModel):
    """Outcome of validating a day/month/year date."""

    valid: bool
    date: datetime.date | None = None


class IdentifierValidationResponse(BaseModel):
    """Outcome of validating a grouped hex identifier."""

    valid: bool


class ChartResponse(BaseModel):
    """Prepared sales chart, or a no-data marker."""

    status: str
    chart: dict[str, object] | None = None
