"""Query builder for ``/alerts``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from brightsky_client.datasources.alerts.models import AlertsResponse
from brightsky_client.datasources.query import Params, QueryBuilder


@dataclass
class AlertsQueryBuilder(QueryBuilder):
    """
    Active weather alerts.

    With no parameters all alerts for Germany are returned. ``with_lat_lon``
    or ``with_warn_cell_id`` narrows them to one municipality.
    """

    endpoint = "alerts"
    response_model = AlertsResponse

    warn_cell_id: int | None = None

    def with_warn_cell_id(self, warn_cell_id: int) -> Self:
        """DWD municipality warn cell id (e.g. 803159016)."""
        self.warn_cell_id = warn_cell_id
        return self

    def params(self) -> Params:
        params = self._location_params()
        if self.warn_cell_id is not None:
            params.append(("warn_cell_id", str(self.warn_cell_id)))
        if self.tz is not None:
            params.append(("tz", self.tz))
        return params
