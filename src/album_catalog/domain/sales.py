"""Domain models for album sales charts."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SalesRecord:
    """One month of album sales."""

    year: int
    month: str
    units_sold: int
    selling_price: float


class SalesRecordPayload(BaseModel):
    """Sales record as published by the sales data source."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    year: int
    month: str
    units_sold: int = Field(alias="albumsSold", ge=0)
    selling_price: float = Field(alias="sellingPrice", ge=0.0)

    def to_record(self) -> SalesRecord:
        """Convert the payload into a domain record."""
        return SalesRecord(
            year=self.year,
            month=self.month,
            units_sold=self.units_sold,
            selling_price=self.selling_price,
        )


@dataclass(frozen=True)
class ChartBar:
    """Plotting position and color of a single sales record."""

    month: str
    year: int
    x: float
    y: float
    width: float
    height: float
    color: str
    units_sold: int
    selling_price: float


@dataclass(frozen=True)
class ChartLegend:
    """Color legend for the selling price scale."""

    title: str
    low_color: str
    high_color: str
    min_price_label: str
    max_price_label: str
    low_text: str
    high_text: str


@dataclass(frozen=True)
class ChartModel:
    """Scales and bar positions ready for a renderer."""

    width: int
    height: int
    months: list[str]
    bandwidth: float
    units_domain: tuple[int, int]
    price_domain: tuple[float, float]
    bars: list[ChartBar]
    legend: ChartLegend
