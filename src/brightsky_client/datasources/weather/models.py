"""Response models for ``/weather``."""

from __future__ import annotations

from brightsky_client.schemas import BrightSkyModel, Condition, Icon, Source


class Weather(BrightSkyModel):
    """One hourly record: historical observation, current SYNOP or MOSMIX forecast."""

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
    precipitation: float | None = None
    solar: float | None = None
    sunshine: float | None = None
    wind_direction: int | None = None
    wind_speed: float | None = None
    wind_gust_direction: int | None = None
    wind_gust_speed: float | None = None
    precipitation_probability: int | None = None
    precipitation_probability_6h: int | None = None


class WeatherResponse(BrightSkyModel):
    weather: list[Weather] = []
    sources: list[Source] = []
