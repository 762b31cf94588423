"""Response models for ``/current_weather``."""

from __future__ import annotations

from brightsky_client.schemas import BrightSkyModel, Condition, CurrentWeatherSource, Icon


class CurrentWeather(BrightSkyModel):
    """
    Latest SYNOP-based observation, with 10/30/60-minute aggregates.

    Fields missing at the nearest station are filled from other sources; the
    ids used are listed in ``fallback_source_ids`` keyed by field name.
    """

    timestamp: str
    source_id: int
    cloud_cover: float | None = None
    condition: Condition | None = None
    dew_point: float | None = None
    icon: Icon | None = None
    pressure_msl: float | None = None
    relative_humidity: int | None = None
    temperature: float | None = None
    visibility: int | None = None
    fallback_source_ids: dict[str, int] | None = None
    precipitation_10: float | None = None
    precipitation_30: float | None = None
    precipitation_60: float | None = None
    solar_10: float | None = None
    solar_30: float | None = None
    solar_60: float | None = None
    sunshine_30: float | None = None
    sunshine_60: float | None = None
    wind_direction_10: int | None = None
    wind_direction_30: int | None = None
    wind_direction_60: int | None = None
    wind_speed_10: float | None = None
    wind_speed_30: float | None = None
    wind_speed_60: float | None = None
    wind_gust_direction_10: int | None = None
    wind_gust_direction_30: int | None = None
    wind_gust_direction_60: int | None = None
    wind_gust_speed_10: float | None = None
    wind_gust_speed_30: float | None = None
    wind_gust_speed_60: float | None = None


class CurrentWeatherResponse(BrightSkyModel):
    weather: CurrentWeather
    sources: list[CurrentWeatherSource]
