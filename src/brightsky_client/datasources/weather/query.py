"""Query builder for ``/weather`` (hourly history and forecast)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from brightsky_client.datasources.query import Params, StationQueryBuilder, format_date
from brightsky_client.datasources.weather.models import WeatherResponse
from brightsky_client.errors import DateNotSetError

if TYPE_CHECKING:
    from datetime import date


@dataclass
class WeatherQueryBuilder(StationQueryBuilder):
    """
    Hourly weather records between ``date`` and ``last_date``.

    Past dates return historical observations (back to 2010-01-01), future
    dates return forecasts. ``date`` is required; ``last_date`` defaults to
    one day after ``date`` on the server side.
    """

    endpoint = "weather"
    response_model = WeatherResponse

    date: date | None = None
    last_date: date | None = None

    def with_date(self, date: date) -> Self:
        self.date = date
        return self

    def with_last_date(self, last_date: date) -> Self:
        self.last_date = last_date
        return self

    def validate(self) -> None:
        if self.date is None:
            raise DateNotSetError
        super().validate()

    def params(self) -> Params:
        params: Params = []
        if self.date is not None:
            params.append(("date", format_date(self.date)))
        if self.last_date is not None:
            params.append(("last_date", format_date(self.last_date)))
        return params + self._station_params() + self._trailing_params()
