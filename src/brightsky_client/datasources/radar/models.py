"""Response models for ``/radar``."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, PlainValidator

from brightsky_client.datasources.radar.precipitation import (
    PrecipitationGrid,
    decode_precipitation,
)
from brightsky_client.schemas import BrightSkyModel


class Radar(BrightSkyModel):
    """One 5-minute radar frame (measurement or forecast)."""

    timestamp: str
    source: str
    precipitation_5: Annotated[PrecipitationGrid, PlainValidator(decode_precipitation)]


class Geometry(BrightSkyModel):
    """Polygon of the returned area in lat/lon, as a GeoJSON-style geometry."""

    geometry_type: str = Field(alias="type")
    coordinates: list[list[float]]


class LatlonPosition(BrightSkyModel):
    """Exact pixel position of the requested lat/lon inside the returned grid."""

    x: float
    y: float


class RadarResponse(BrightSkyModel):
    radar: list[Radar] = []
    geometry: Geometry | None = None
    # top, left, bottom, right in grid pixels
    bbox: list[int] | None = None
    latlon_position: LatlonPosition | None = None

    @property
    def grid_width(self) -> int | None:
        """Row width of the returned grids, from the response bbox."""
        if not self.bbox or len(self.bbox) != 4:
            return None
        return self.bbox[3] - self.bbox[1]
