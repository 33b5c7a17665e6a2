"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherbar.config.defaults import (
    DEFAULT_LOOKBACK_HOURS,
    DEFAULT_TIMEOUT_SECONDS,
    WTTR_URL,
)


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    url: str = WTTR_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    lookback_hours: int = Field(default=DEFAULT_LOOKBACK_HOURS, ge=0, le=24)


class WeatherbarConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: SourceConfig = SourceConfig()
    display: DisplayConfig = DisplayConfig()
