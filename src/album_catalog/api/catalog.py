"""Catalog, validation and sales chart endpoints."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from album_catalog.api.models import (
    AlbumResponse,
    ChartResponse,
    DateValidationResponse,
    IdentifierValidationResponse,
)
from album_catalog.domain.sales import SalesRecordPayload  # noqa: TC001
from album_catalog.services.validators import validate_date, validate_identifier

if TYPE_CHECKING:
    from album_catalog.containers import AppContainer
    from album_catalog.domain.sales import ChartModel


def _container(request: Request) -> AppContainer:
    return request.app.state.container


async def list_albums(request: Request) -> list[AlbumResponse]:
    """Return the whole catalog."""
    albums = _container(request).album_service.list_albums()
    return [AlbumResponse.from_album(album) for album in albums]


async def list_sorted_albums(
    request: Request,
    sort_by: str = Query(default="title", alias="sortBy"),
    ascending: bool = True,
) -> list[AlbumResponse]:
    """Return the catalog ordered by title, artist or price."""
    albums = _container(request).album_service.list_sorted(sort_by, ascending)
    return [AlbumResponse.from_album(album) for album in albums]


async def get_album(album_id: int, request: Request) -> AlbumResponse:
    """Return a single album."""
    album = _container(request).album_service.get_album(album_id)
    if album is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Album with ID {album_id} not found",
        )
    return AlbumResponse.from_album(album)


async def check_date(value: str) -> DateValidationResponse:
    """Validate a day/month/year date."""
    parsed = validate_date(value)
    return DateValidationResponse(valid=parsed is not None, date=parsed)


async def check_identifier(value: str) -> IdentifierValidationResponse:
    """Validate a grouped hex identifier."""
    return IdentifierValidationResponse(valid=validate_identifier(value))


async def sales_chart(request: Request, source: str | None = None) -> ChartResponse:
    """Fetch sales data and return the prepared chart."""
    chart = await _container(request).sales_chart_service.build_chart(source)
    return _chart_response(chart)


async def sales_chart_from_records(
    records: list[SalesRecordPayload], request: Request
) -> ChartResponse:
    """Prepare a chart from sales records posted by the caller."""
    service = _container(request).sales_chart_service
    chart = service.prepare([record.to_record() for record in records])
    return _chart_response(chart)


async def viewer_albums(request: Request) -> list[AlbumResponse]:
    """Return the album listing fetched from the remote albums API."""
    albums = await _container(request).album_viewer_service.load_albums()
    return [AlbumResponse.from_album(album) for album in albums]


@dataclass(frozen=True)
class Route:
    """Single entry of the dispatch table."""

    method: str
    path: str
    endpoint: Callable[..., object]


# Static paths must precede the parameterized album path.
ROUTES: tuple[Route, ...] = (
    Route("GET", "/albums", list_albums),
    Route("GET", "/albums/sorted", list_sorted_albums),
    Route("GET", "/albums/{album_id}", get_album),
    Route("GET", "/validate/date", check_date),
    Route("GET", "/validate/identifier", check_identifier),
    Route("GET", "/sales/chart", sales_chart),
    Route("POST", "/sales/chart", sales_chart_from_records),
    Route("GET", "/viewer/albums", viewer_albums),
)


def build_router(routes: tuple[Route, ...] = ROUTES) -> APIRouter:
    """Register every route of the table on a fresh router."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(route.path, route.endpoint, methods=[route.method])
    return router


def _chart_response(chart: ChartModel | None) -> ChartResponse:
    if chart is None:
        return ChartResponse(status="no_data")
    return ChartResponse(status="ok", chart=asdict(chart))
