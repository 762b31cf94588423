"""Bright Sky client - typed access to DWD weather data via https://brightsky.dev.

Architecture::

    datasources/   One package per endpoint (query builder + response models)
    schemas.py     Enums and station records shared across endpoints
    services/      Shared utilities (HTTP session with retry)
    client.py      BrightSkyClient: run a built query, return a typed response
    config.py      Settings from BRIGHTSKY_* environment variables
    errors.py      Exception hierarchy

Data flow: query builder -> client (requests) -> pydantic response model.
Radar precipitation grids are decoded while the response is parsed, see
``datasources/radar/precipitation.py``.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from brightsky_client.client import BrightSkyClient  # noqa: E402
from brightsky_client.config import BRIGHT_SKY_API, Settings, get_settings  # noqa: E402
from brightsky_client.datasources.alerts import AlertsQueryBuilder, AlertsResponse  # noqa: E402
from brightsky_client.datasources.current_weather import (  # noqa: E402
    CurrentWeatherQueryBuilder,
    CurrentWeatherResponse,
)
from brightsky_client.datasources.radar import (  # noqa: E402
    BytesPrecipitation,
    CompressedPrecipitation,
    PlainPrecipitation,
    PrecipitationGrid,
    RadarResponse,
    RadarWeatherQueryBuilder,
    decode_precipitation,
)
from brightsky_client.datasources.weather import WeatherQueryBuilder, WeatherResponse  # noqa: E402
from brightsky_client.errors import BrightSkyError, PrecipitationDecodeError, QueryError  # noqa: E402
from brightsky_client.schemas import RadarCompressionFormat, UnitType  # noqa: E402

__all__ = [
    "BRIGHT_SKY_API",
    "AlertsQueryBuilder",
    "AlertsResponse",
    "BrightSkyClient",
    "BrightSkyError",
    "BytesPrecipitation",
    "CompressedPrecipitation",
    "CurrentWeatherQueryBuilder",
    "CurrentWeatherResponse",
    "PlainPrecipitation",
    "PrecipitationDecodeError",
    "PrecipitationGrid",
    "QueryError",
    "RadarCompressionFormat",
    "RadarResponse",
    "RadarWeatherQueryBuilder",
    "Settings",
    "UnitType",
    "WeatherQueryBuilder",
    "WeatherResponse",
    "__version__",
    "decode_precipitation",
    "get_settings",
]
