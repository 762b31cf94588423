"""Base query builder shared by all endpoints.

Builders are fluent: each ``with_*`` call stores one parameter and returns
the builder, ``build()`` validates, and ``params()`` / ``to_url()`` render
the query::

    query = CurrentWeatherQueryBuilder().with_lat_lon((52.52, 13.4)).build()
    query.to_url("https://api.brightsky.dev")
    # 'https://api.brightsky.dev/current_weather?lat=52.52&lon=13.4'
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Self
from urllib.parse import urlencode

from brightsky_client.errors import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidMaxDistanceError,
)

if TYPE_CHECKING:
    from datetime import date

    from pydantic import BaseModel

    from brightsky_client.schemas import UnitType

Params = list[tuple[str, str]]

# Upper bound the API accepts for ``max_dist``, in meters
MAX_DIST_LIMIT = 500_000


def format_coordinate(value: float) -> str:
    """Render a coordinate in plain decimal notation; whole numbers keep one decimal place (52 -> "52.0")."""
    text = format(Decimal(repr(float(value))), "f")
    return text if "." in text else f"{text}.0"


def format_date(value: date) -> str:
    """ISO-8601 date (or datetime) string as the API expects it."""
    return value.isoformat()


@dataclass
class QueryBuilder:
    """Parameters common to every endpoint: location and timezone."""

    endpoint: ClassVar[str]
    response_model: ClassVar[type[BaseModel]]

    lat: str | None = None
    lon: str | None = None
    tz: str | None = None

    def with_lat_lon(self, lat_lon: tuple[float, float]) -> Self:
        """Set latitude and longitude in decimal degrees."""
        self.lat = format_coordinate(lat_lon[0])
        self.lon = format_coordinate(lat_lon[1])
        return self

    def with_tz(self, tz: str) -> Self:
        """Timezone for returned timestamps, in tz database format (e.g. "Europe/Berlin")."""
        self.tz = tz
        return self

    def build(self) -> Self:
        """Validate the parameters and return the builder.

        Raises:
            QueryError: A parameter is missing or out of range.
        """
        self.validate()
        return self

    def validate(self) -> None:
        if self.lat is not None:
            lat = float(self.lat)
            if not -90.0 <= lat <= 90.0:
                raise InvalidLatitudeError(lat)
        if self.lon is not None:
            lon = float(self.lon)
            if not -180.0 <= lon <= 180.0:
                raise InvalidLongitudeError(lon)

    def params(self) -> Params:
        """Ordered ``(key, value)`` pairs; repeated keys appear once per value."""
        raise NotImplementedError

    def to_url(self, host: str) -> str:
        """Full request URL for this query against ``host``."""
        url = f"{host.rstrip('/')}/{self.endpoint}"
        params = self.params()
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _location_params(self) -> Params:
        params: Params = []
        if self.lat is not None:
            params.append(("lat", self.lat))
        if self.lon is not None:
            params.append(("lon", self.lon))
        return params


@dataclass
class StationQueryBuilder(QueryBuilder):
    """Station selection shared by ``/current_weather`` and ``/weather``.

    Records are looked up either by location (``lat``/``lon`` within
    ``max_dist`` meters) or by explicit DWD, WMO or Bright Sky source ids.
    """

    max_dist: int | None = None
    dwd_station_id: list[str] | None = None
    wmo_station_id: list[str] | None = None
    source_id: list[int] | None = None
    units: UnitType | None = None

    def with_max_dist(self, max_dist: int) -> Self:
        """Maximum station distance from lat/lon in meters (0-500000)."""
        self.max_dist = max_dist
        return self

    def with_dwd_station_id(self, ids: list[str]) -> Self:
        """DWD station ids, typically five alphanumeric characters (e.g. "01766")."""
        self.dwd_station_id = list(ids)
        return self

    def with_wmo_station_id(self, ids: list[str]) -> Self:
        """WMO station ids, typically five alphanumeric characters (e.g. "10315")."""
        self.wmo_station_id = list(ids)
        return self

    def with_source_id(self, ids: list[int]) -> Self:
        """Bright Sky source ids, as returned in ``sources[].id``."""
        self.source_id = list(ids)
        return self

    def with_units(self, units: UnitType) -> Self:
        self.units = units
        return self

    def validate(self) -> None:
        super().validate()
        if self.max_dist is not None and not 0 <= self.max_dist <= MAX_DIST_LIMIT:
            raise InvalidMaxDistanceError(self.max_dist)

    def _station_params(self) -> Params:
        params = self._location_params()
        if self.max_dist is not None:
            params.append(("max_dist", str(self.max_dist)))
        params.extend(("dwd_station_id", station) for station in self.dwd_station_id or [])
        params.extend(("wmo_station_id", station) for station in self.wmo_station_id or [])
        params.extend(("source_id", str(source)) for source in self.source_id or [])
        return params

    def _trailing_params(self) -> Params:
        params: Params = []
        if self.tz is not None:
            params.append(("tz", self.tz))
        if self.units is not None:
            params.append(("units", str(self.units)))
        return params
