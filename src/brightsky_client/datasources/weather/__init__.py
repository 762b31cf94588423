"""Hourly weather history and forecast (``/weather``).

Public API:
  - query: WeatherQueryBuilder
  - models: Weather, WeatherResponse
"""

from brightsky_client.datasources.weather.models import Weather, WeatherResponse
from brightsky_client.datasources.weather.query import WeatherQueryBuilder

__all__ = [
    "Weather",
    "WeatherQueryBuilder",
    "WeatherResponse",
]
