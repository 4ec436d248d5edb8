"""Shared test fixtures."""

from dataclasses import dataclass, field
from decimal import Decimal

import httpx
import pytest

from album_catalog.adapters.albums_api_client import AlbumsApiClient
from album_catalog.adapters.sales_data_client import SalesDataClient
from album_catalog.config import Settings
from album_catalog.containers import AppContainer
from album_catalog.domain.albums import Album
from album_catalog.services.albums import AlbumRepository, AlbumService
from album_catalog.services.charts import SalesChartService
from album_catalog.services.viewer import AlbumViewerService


@dataclass
class InMemoryAlbumRepository(AlbumRepository):
    """In-memory album repository for tests."""

    albums: list[Album] = field(default_factory=list)

    def list_albums(self) -> list[Album]:
        return list(self.albums)


@dataclass
class FakeSalesDataClient(SalesDataClient):
    """Fake sales data client returning a fixed payload."""

    payload: list[dict[str, object]] = field(
        default_factory=lambda: [
            {"year": 2023, "month": "Jan", "albumsSold": 120, "sellingPrice": 9.99},
            {"year": 2023, "month": "Feb", "albumsSold": 60, "sellingPrice": 12.49},
            {"year": 2023, "month": "Mar", "albumsSold": 90, "sellingPrice": 14.99},
        ]
    )
    error: Exception | None = None
    locations: list[str] = field(default_factory=list)

    async def fetch_sales(self, location: str) -> list[dict[str, object]]:
        self.locations.append(location)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeAlbumsApiClient(AlbumsApiClient):
    """Fake albums API client returning a fixed listing."""

    payload: list[dict[str, object]] = field(
        default_factory=lambda: [
            {
                "Id": 7,
                "Title": "Remote Hits",
                "Artist": "The Fetchers",
                "Price": 9.5,
                "Genre": "Jazz",
            }
        ]
    )
    error: Exception | None = None

    async def list_albums(self) -> list[dict[str, object]]:
        if self.error is not None:
            raise self.error
        return self.payload


def make_album(  # noqa: PLR0913
    album_id: int,
    title: str = "Untitled",
    artist: str = "Unknown",
    price: str = "9.99",
    genre: str = "Pop",
) -> Album:
    return Album(
        id=album_id,
        title=title,
        artist=artist,
        price=Decimal(price),
        genre=genre,
    )


def transport_error() -> httpx.HTTPError:
    request = httpx.Request("GET", "https://sales.test/data.json")
    return httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        albums_api_url="https://albums.test/albums",
        sales_data_url="https://sales.test/data.json",
    )


@pytest.fixture
def album_repository() -> InMemoryAlbumRepository:
    return InMemoryAlbumRepository(
        albums=[
            make_album(1, "Blue Train", "John Coltrane", "12.99", "Jazz"),
            make_album(2, "abbey Road", "The Beatles", "14.99", "Rock"),
            make_album(3, "Kind of Blue", "Miles Davis", "12.99", "Jazz"),
            make_album(4, "Abbey Road", "The Beatles", "9.99", "Rock"),
        ]
    )


@pytest.fixture
def sales_client() -> FakeSalesDataClient:
    return FakeSalesDataClient()


@pytest.fixture
def albums_api_client() -> FakeAlbumsApiClient:
    return FakeAlbumsApiClient()


@pytest.fixture
def container(
    settings: Settings,
    album_repository: InMemoryAlbumRepository,
    sales_client: FakeSalesDataClient,
    albums_api_client: FakeAlbumsApiClient,
) -> AppContainer:
    sales_chart_service = SalesChartService(
        client=sales_client,
        default_location=settings.sales_data_url,
        width=settings.chart_width,
        height=settings.chart_height,
        padding=settings.chart_padding,
        low_color=settings.chart_low_color,
        high_color=settings.chart_high_color,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        album_service=AlbumService(album_repository),
        sales_chart_service=sales_chart_service,
        album_viewer_service=AlbumViewerService(albums_api_client),
        close_resources=close_resources,
    )
