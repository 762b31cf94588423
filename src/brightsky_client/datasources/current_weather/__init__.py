"""Current weather (``/current_weather``).

Public API:
  - query: CurrentWeatherQueryBuilder
  - models: CurrentWeather, CurrentWeatherResponse
"""

from brightsky_client.datasources.current_weather.models import (
    CurrentWeather,
    CurrentWeatherResponse,
)
from brightsky_client.datasources.current_weather.query import CurrentWeatherQueryBuilder

__all__ = [
    "CurrentWeather",
    "CurrentWeatherQueryBuilder",
    "CurrentWeatherResponse",
]
