"""Query builder for ``/radar``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from brightsky_client.datasources.query import Params, QueryBuilder, format_date
from brightsky_client.datasources.radar.models import RadarResponse
from brightsky_client.errors import InvalidBboxError, InvalidDistanceError

if TYPE_CHECKING:
    from datetime import date

    from brightsky_client.schemas import RadarCompressionFormat


@dataclass
class RadarWeatherQueryBuilder(QueryBuilder):
    """
    Rainfall radar with 1 km / 5 min resolution and a two-hour forecast.

    The full grid is 1200x1100 pixels in polar-stereographic projection, so
    narrow the area with ``with_lat_lon`` (+ ``with_distance``) or
    ``with_bbox``.  Past frames are kept for six hours only.

    ``compressed`` is the smallest wire format; ``plain`` is the easiest to
    inspect.  Binary formats decode to flat grids; reshape them with
    ``bbox_width()`` or ``RadarResponse.grid_width``.
    """

    endpoint = "radar"
    response_model = RadarResponse

    bbox: list[int] | None = None
    distance: int | None = None
    date: date | None = None
    last_date: date | None = None
    compression_format: RadarCompressionFormat | None = None

    def with_bbox(self, bbox: list[int]) -> Self:
        """Pixel bounding box as (top, left, bottom, right)."""
        self.bbox = list(bbox)
        return self

    def with_distance(self, distance: int) -> Self:
        """Meters around lat/lon in each direction (server default: 200000)."""
        self.distance = distance
        return self

    def with_date(self, date: date) -> Self:
        """First frame to return (server default: one hour before the latest)."""
        self.date = date
        return self

    def with_last_date(self, last_date: date) -> Self:
        """Last frame to return (server default: two hours after ``date``)."""
        self.last_date = last_date
        return self

    def with_compression_format(self, compression_format: RadarCompressionFormat) -> Self:
        self.compression_format = compression_format
        return self

    def bbox_width(self) -> int | None:
        """Grid row width in pixels for the requested bbox, if one was set."""
        if self.bbox is None or len(self.bbox) != 4:
            return None
        return self.bbox[3] - self.bbox[1]

    def validate(self) -> None:
        super().validate()
        if self.bbox is not None and (
            len(self.bbox) != 4 or not all(isinstance(v, int) for v in self.bbox)
        ):
            raise InvalidBboxError(self.bbox)
        if self.distance is not None and self.distance < 0:
            raise InvalidDistanceError(self.distance)

    def params(self) -> Params:
        params = self._location_params()
        if self.bbox is not None:
            params.append(("bbox", ",".join(str(v) for v in self.bbox)))
        if self.distance is not None:
            params.append(("distance", str(self.distance)))
        if self.date is not None:
            params.append(("date", format_date(self.date)))
        if self.last_date is not None:
            params.append(("last_date", format_date(self.last_date)))
        if self.compression_format is not None:
            params.append(("format", str(self.compression_format)))
        if self.tz is not None:
            params.append(("tz", self.tz))
        return params
