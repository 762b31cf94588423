"""
Bright Sky API client.

Runs a built query against the API and parses the body into the query's
response model::

    from brightsky_client import BrightSkyClient, RadarWeatherQueryBuilder

    client = BrightSkyClient()
    query = RadarWeatherQueryBuilder().with_bbox([100, 100, 300, 300])
    response = client.radar(query)
    rows = response.radar[0].precipitation_5.to_rows(response.grid_width)

Errors propagate unchanged: ``QueryError`` from validation,
``requests.HTTPError`` for non-2xx statuses, ``pydantic.ValidationError``
for payloads that don't match the schema (including undecodable radar grids).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from brightsky_client.config import get_settings
from brightsky_client.services.http import create_session

if TYPE_CHECKING:
    import requests
    from pydantic import BaseModel

    from brightsky_client.datasources.alerts import AlertsQueryBuilder, AlertsResponse
    from brightsky_client.datasources.current_weather import (
        CurrentWeatherQueryBuilder,
        CurrentWeatherResponse,
    )
    from brightsky_client.datasources.query import QueryBuilder
    from brightsky_client.datasources.radar import RadarResponse, RadarWeatherQueryBuilder
    from brightsky_client.datasources.weather import WeatherQueryBuilder, WeatherResponse

logger = logging.getLogger(__name__)


class BrightSkyClient:
    """Client for the Bright Sky weather API."""

    def __init__(self, host: str | None = None, session: requests.Session | None = None) -> None:
        """
        Args:
            host: API base URL (defaults to ``Settings.api_host``).
            session: HTTP session to use (defaults to ``create_session()``).
        """
        self.host = host or get_settings().api_host
        self.session = session if session is not None else create_session()

    def get_json(self, query: QueryBuilder) -> dict[str, Any]:
        """Validate ``query``, fetch it and return the raw JSON body."""
        url = query.build().to_url(self.host)
        logger.info("GET %s", url)
        resp = self.session.get(url)
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
        logger.debug("%s returned %d bytes", query.endpoint, len(resp.content))
        return data

    def get(self, query: QueryBuilder) -> BaseModel:
        """Fetch ``query`` and parse it into ``query.response_model``."""
        return query.response_model.model_validate(self.get_json(query))

    def current_weather(self, query: CurrentWeatherQueryBuilder) -> CurrentWeatherResponse:
        return self.get(query)  # type: ignore[return-value]

    def weather(self, query: WeatherQueryBuilder) -> WeatherResponse:
        return self.get(query)  # type: ignore[return-value]

    def radar(self, query: RadarWeatherQueryBuilder) -> RadarResponse:
        return self.get(query)  # type: ignore[return-value]

    def alerts(self, query: AlertsQueryBuilder) -> AlertsResponse:
        return self.get(query)  # type: ignore[return-value]
