"""Application configuration."""

import os
import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    albums_api_url: str = "http://localhost:3000/albums"
    sales_data_url: str | None = None
    sales_allowed_hosts: str | None = None
    http_timeout_seconds: float = 10.0
    chart_width: int = 870
    chart_height: int = 450
    chart_padding: float = 0.1
    chart_low_color: str = "#4CAF50"
    chart_high_color: str = "#FF6B6B"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("chart_low_color", "chart_high_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not _HEX_COLOR.fullmatch(value):
            raise ValueError(f"expected a #rrggbb color, got {value!r}")
        return value


def parse_allowed_hosts(raw: str | None) -> frozenset[str]:
    """Parse extra sales data hosts callers may name as a chart source."""
    if raw is None:
        return frozenset()
    return frozenset(
        chunk.strip().lower() for chunk in raw.split(",") if chunk.strip()
    )
