"""Query builder for ``/current_weather``."""

from __future__ import annotations

from dataclasses import dataclass

from brightsky_client.datasources.current_weather.models import CurrentWeatherResponse
from brightsky_client.datasources.query import Params, StationQueryBuilder


@dataclass
class CurrentWeatherQueryBuilder(StationQueryBuilder):
    """
    Current conditions compiled from recent SYNOP observations.

    Either ``with_lat_lon`` or one of the station id filters should be set;
    the API rejects requests that identify no station.
    """

    endpoint = "current_weather"
    response_model = CurrentWeatherResponse

    def params(self) -> Params:
        return self._station_params() + self._trailing_params()
