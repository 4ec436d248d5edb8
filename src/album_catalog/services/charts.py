"""Sales chart preparation."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from pydantic import TypeAdapter, ValidationError

from album_catalog.adapters.sales_data_client import SalesDataClient
from album_catalog.domain.sales import (
    ChartBar,
    ChartLegend,
    ChartModel,
    SalesRecord,
    SalesRecordPayload,
)

LOW_COLOR = "#4CAF50"
HIGH_COLOR = "#FF6B6B"
LEGEND_TITLE = "Selling Price"

_PAYLOAD_ADAPTER = TypeAdapter(list[SalesRecordPayload])
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandScale:
    """Categorical scale splitting a range into evenly padded bands."""

    domain: list[str]
    start: float
    step: float
    bandwidth: float

    @classmethod
    def build(cls, domain: list[str], width: float, padding: float) -> "BandScale":
        """Lay out bands over ``[0, width]`` with equal inner and outer padding."""
        count = len(domain)
        step = width / max(1.0, count - padding + padding * 2)
        start = (width - step * (count - padding)) / 2
        return cls(
            domain=domain, start=start, step=step, bandwidth=step * (1 - padding)
        )

    def __call__(self, value: str) -> float:
        return self.start + self.step * self.domain.index(value)


def interpolate_color(low: str, high: str, fraction: float) -> str:
    """Linearly interpolate two ``#rrggbb`` colors in RGB space.

    Channels round half up, matching browser chart libraries.
    """
    low_rgb = _parse_hex(low)
    high_rgb = _parse_hex(high)
    channels = (
        math.floor(start + (end - start) * fraction + 0.5)
        for start, end in zip(low_rgb, high_rgb, strict=True)
    )
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def prepare_sales_chart(  # noqa: PLR0913
    records: Sequence[SalesRecord],
    *,
    width: int = 870,
    height: int = 450,
    padding: float = 0.1,
    low_color: str = LOW_COLOR,
    high_color: str = HIGH_COLOR,
) -> ChartModel | None:
    """Compute scales, bar positions and legend for monthly sales.

    Returns ``None`` when there are no records. Months keep their input order,
    the units axis always starts at zero, and bars are colored by selling
    price between ``low_color`` and ``high_color``.
    """
    if not records:
        return None

    months = list(dict.fromkeys(record.month for record in records))
    x_scale = BandScale.build(months, width, padding)
    max_units = max(record.units_sold for record in records)
    min_price = min(record.selling_price for record in records)
    max_price = max(record.selling_price for record in records)
    price_span = max_price - min_price

    bars = []
    for record in records:
        bar_height = height * record.units_sold / max_units if max_units else 0.0
        fraction = (
            (record.selling_price - min_price) / price_span if price_span else 0.5
        )
        # A single or unbounded price maps to the middle of the gradient.
        if not math.isfinite(fraction):
            fraction = 0.5
        bars.append(
            ChartBar(
                month=record.month,
                year=record.year,
                x=x_scale(record.month),
                y=height - bar_height,
                width=x_scale.bandwidth,
                height=bar_height,
                color=interpolate_color(low_color, high_color, fraction),
                units_sold=record.units_sold,
                selling_price=record.selling_price,
            )
        )

    min_label = f"{min_price:.2f}"
    max_label = f"{max_price:.2f}"
    return ChartModel(
        width=width,
        height=height,
        months=months,
        bandwidth=x_scale.bandwidth,
        units_domain=(0, max_units),
        price_domain=(min_price, max_price),
        bars=bars,
        legend=ChartLegend(
            title=LEGEND_TITLE,
            low_color=low_color,
            high_color=high_color,
            min_price_label=min_label,
            max_price_label=max_label,
            low_text=f"Low: ${min_label}",
            high_text=f"High: ${max_label}",
        ),
    )


def parse_sales_records(payload: object) -> list[SalesRecord]:
    """Validate raw sales JSON into domain records."""
    return [item.to_record() for item in _PAYLOAD_ADAPTER.validate_python(payload)]


@dataclass
class SalesChartService:
    """Fetch sales data and turn it into a chart model."""

    client: SalesDataClient
    default_location: str | None = None
    allowed_hosts: frozenset[str] = frozenset()
    width: int = 870
    height: int = 450
    padding: float = 0.1
    low_color: str = LOW_COLOR
    high_color: str = HIGH_COLOR

    async def load_records(self, location: str | None = None) -> list[SalesRecord]:
        """Fetch sales records, returning an empty list when the fetch fails."""
        resolved = location or self.default_location
        if not resolved:
            _logger.warning("No sales data location configured")
            return []
        try:
            if location and not self._is_allowed(location):
                _logger.warning(
                    "Sales data host not allowed", extra={"location": location}
                )
                return []
            payload = await self.client.fetch_sales(resolved)
            return parse_sales_records(payload)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, ValidationError):
            _logger.exception(
                "Failed to load sales data", extra={"location": resolved}
            )
            return []

    async def build_chart(self, location: str | None = None) -> ChartModel | None:
        """Fetch sales records and prepare the chart."""
        return self.prepare(await self.load_records(location))

    def prepare(self, records: Sequence[SalesRecord]) -> ChartModel | None:
        """Prepare a chart using the configured dimensions and colors."""
        return prepare_sales_chart(
            records,
            width=self.width,
            height=self.height,
            padding=self.padding,
            low_color=self.low_color,
            high_color=self.high_color,
        )

    def _is_allowed(self, location: str) -> bool:
        """Return true when the location is on the default or an allowed host."""
        hosts = set(self.allowed_hosts)
        if self.default_location:
            hosts.add(httpx.URL(self.default_location).host)
        return httpx.URL(location).host.lower() in hosts


def _parse_hex(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
