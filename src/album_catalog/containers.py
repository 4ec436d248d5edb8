"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from album_catalog.adapters.albums_api_client import HttpxAlbumsApiClient
from album_catalog.adapters.fixture_album_repository import FixtureAlbumRepository
from album_catalog.adapters.sales_data_client import HttpxSalesDataClient
from album_catalog.config import Settings, parse_allowed_hosts
from album_catalog.services.albums import AlbumService
from album_catalog.services.charts import SalesChartService
from album_catalog.services.viewer import AlbumViewerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    album_service: AlbumService
    sales_chart_service: SalesChartService
    album_viewer_service: AlbumViewerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    album_service = AlbumService(FixtureAlbumRepository())
    sales_client = HttpxSalesDataClient.create(
        timeout_seconds=resolved_settings.http_timeout_seconds
    )
    sales_chart_service = SalesChartService(
        client=sales_client,
        default_location=resolved_settings.sales_data_url,
        allowed_hosts=parse_allowed_hosts(resolved_settings.sales_allowed_hosts),
        width=resolved_settings.chart_width,
        height=resolved_settings.chart_height,
        padding=resolved_settings.chart_padding,
        low_color=resolved_settings.chart_low_color,
        high_color=resolved_settings.chart_high_color,
    )
    albums_api_client = HttpxAlbumsApiClient.create(
        albums_url=resolved_settings.albums_api_url,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    album_viewer_service = AlbumViewerService(albums_api_client)

    async def close_resources() -> None:
        await sales_client.close()
        await albums_api_client.close()

    return AppContainer(
        settings=resolved_settings,
        album_service=album_service,
        sales_chart_service=sales_chart_service,
        album_viewer_service=album_viewer_service,
        close_resources=close_resources,
    )
