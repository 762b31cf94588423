"""Rainfall radar (``/radar``).

Public API:
  - query: RadarWeatherQueryBuilder
  - models: Radar, Geometry, LatlonPosition, RadarResponse
  - precipitation: decode_precipitation and the three grid variants
"""

from brightsky_client.datasources.radar.models import (
    Geometry,
    LatlonPosition,
    Radar,
    RadarResponse,
)
from brightsky_client.datasources.radar.precipitation import (
    SAMPLE_RESOLUTION_MM,
    BytesPrecipitation,
    CompressedPrecipitation,
    PlainPrecipitation,
    PrecipitationGrid,
    decode_precipitation,
    unpack_samples,
)
from brightsky_client.datasources.radar.query import RadarWeatherQueryBuilder

__all__ = [
    "SAMPLE_RESOLUTION_MM",
    "BytesPrecipitation",
    "CompressedPrecipitation",
    "Geometry",
    "LatlonPosition",
    "PlainPrecipitation",
    "PrecipitationGrid",
    "Radar",
    "RadarResponse",
    "RadarWeatherQueryBuilder",
    "decode_precipitation",
    "unpack_samples",
]
