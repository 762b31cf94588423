"""
Shared schema for Bright Sky responses and parameters.

Enums used by more than one endpoint plus the station ``Source`` records.
Endpoint envelopes live next to their query builders in ``datasources/``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

# =============================================================================
# Weather enums
# =============================================================================


class WeatherIcon(StrEnum):
    """Icon alias suitable for display; unrecognized values map to ``UNKNOWN``."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    WIND = "wind"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> WeatherIcon | None:
        return cls.UNKNOWN if isinstance(value, str) else None


class WeatherCondition(StrEnum):
    """Dominant weather condition; unrecognized values map to ``UNKNOWN``."""

    DRY = "dry"
    FOG = "fog"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> WeatherCondition | None:
        return cls.UNKNOWN if isinstance(value, str) else None


# The API adds icon/condition values over time; route them through the enum
# constructor so ``_missing_`` applies before pydantic's strict enum check.
Icon = Annotated[WeatherIcon, BeforeValidator(lambda v: WeatherIcon(v))]
Condition = Annotated[WeatherCondition, BeforeValidator(lambda v: WeatherCondition(v))]


class ObservationType(StrEnum):
    """Kind of station record a source provides."""

    HISTORICAL = "historical"
    CURRENT = "current"
    SYNOP = "synop"
    FORECAST = "forecast"


class UnitType(StrEnum):
    """Physical units for returned values (SI or DWD conventions)."""

    SI = "si"
    DWD = "dwd"


class RadarCompressionFormat(StrEnum):
    """Wire encoding requested for radar precipitation grids."""

    COMPRESSED = "compressed"
    BYTES = "bytes"
    PLAIN = "plain"


# =============================================================================
# Sources
# =============================================================================


class BrightSkyModel(BaseModel):
    """Base for response records: immutable, tolerant of new API fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Source(BrightSkyModel):
    """A weather station or forecast source backing ``/weather`` records."""

    id: int
    dwd_station_id: str | None = None
    wmo_station_id: str | None = None
    station_name: str | None = None
    observation_type: ObservationType
    first_record: str
    last_record: str
    lat: float
    lon: float
    height: float
    distance: float | None = None


class CurrentWeatherSource(BrightSkyModel):
    """A SYNOP station backing ``/current_weather``; identifiers always present."""

    id: int
    dwd_station_id: str
    wmo_station_id: str
    station_name: str
    observation_type: ObservationType
    first_record: str
    last_record: str
    lat: float
    lon: float
    height: float
    distance: float | None = None
