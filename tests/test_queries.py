"""Tests for the endpoint query builders."""

from __future__ import annotations

from datetime import date, datetime
from urllib.parse import parse_qsl, urlsplit

import pytest

from brightsky_client.datasources.alerts import AlertsQueryBuilder, AlertsResponse
from brightsky_client.datasources.current_weather import (
    CurrentWeatherQueryBuilder,
    CurrentWeatherResponse,
)
from brightsky_client.datasources.query import format_coordinate
from brightsky_client.datasources.radar import RadarResponse, RadarWeatherQueryBuilder
from brightsky_client.datasources.weather import WeatherQueryBuilder, WeatherResponse
from brightsky_client.errors import (
    DateNotSetError,
    InvalidBboxError,
    InvalidDistanceError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidMaxDistanceError,
    QueryError,
)
from brightsky_client.schemas import RadarCompressionFormat, UnitType

HOST = "https://api.brightsky.dev"


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query)


# =============================================================================
# Shared behavior
# =============================================================================


class TestFormatCoordinate:
    def test_whole_number_gets_decimal(self) -> None:
        assert format_coordinate(52) == "52.0"
        assert format_coordinate(-7.0) == "-7.0"

    def test_precision_preserved(self) -> None:
        assert format_coordinate(52.52) == "52.52"
        assert format_coordinate(13.404954) == "13.404954"

    def test_small_values_without_exponent(self) -> None:
        assert format_coordinate(0.00001) == "0.00001"
        assert format_coordinate(-0.0000123) == "-0.0000123"


class TestLocationValidation:
    """lat/lon range checks apply to every builder."""

    @pytest.mark.parametrize(
        "builder",
        [CurrentWeatherQueryBuilder, RadarWeatherQueryBuilder, AlertsQueryBuilder],
    )
    def test_invalid_latitude(self, builder: type) -> None:
        with pytest.raises(InvalidLatitudeError) as exc_info:
            builder().with_lat_lon((91.0, 13.4)).build()
        assert exc_info.value.value == 91.0

    @pytest.mark.parametrize(
        "builder",
        [CurrentWeatherQueryBuilder, RadarWeatherQueryBuilder, AlertsQueryBuilder],
    )
    def test_invalid_longitude(self, builder: type) -> None:
        with pytest.raises(InvalidLongitudeError):
            builder().with_lat_lon((52.5, -180.5)).build()

    def test_boundaries_accepted(self) -> None:
        CurrentWeatherQueryBuilder().with_lat_lon((90.0, -180.0)).build()
        CurrentWeatherQueryBuilder().with_lat_lon((-90.0, 180.0)).build()

    def test_errors_are_query_errors(self) -> None:
        with pytest.raises(QueryError):
            AlertsQueryBuilder().with_lat_lon((100.0, 0.0)).build()

    def test_error_message(self) -> None:
        with pytest.raises(InvalidLatitudeError, match="between -90 and 90, got 91.0"):
            AlertsQueryBuilder().with_lat_lon((91.0, 0.0)).build()

    def test_build_returns_builder(self) -> None:
        builder = AlertsQueryBuilder().with_lat_lon((52.0, 7.6))
        assert builder.build() is builder


class TestToUrl:
    def test_trailing_slash_on_host(self) -> None:
        query = AlertsQueryBuilder().with_warn_cell_id(803159016)
        assert query.to_url(HOST + "/") == f"{HOST}/alerts?warn_cell_id=803159016"

    def test_no_params_no_question_mark(self) -> None:
        assert AlertsQueryBuilder().to_url(HOST) == f"{HOST}/alerts"

    def test_values_are_encoded(self) -> None:
        url = AlertsQueryBuilder().with_tz("Europe/Berlin").to_url(HOST)
        assert url == f"{HOST}/alerts?tz=Europe%2FBerlin"


# =============================================================================
# /current_weather
# =============================================================================


class TestCurrentWeatherQuery:
    def test_response_model(self) -> None:
        assert CurrentWeatherQueryBuilder.endpoint == "current_weather"
        assert CurrentWeatherQueryBuilder.response_model is CurrentWeatherResponse

    def test_lat_lon_url(self) -> None:
        url = CurrentWeatherQueryBuilder().with_lat_lon((52.52, 13.4)).build().to_url(HOST)
        assert url == f"{HOST}/current_weather?lat=52.52&lon=13.4"

    def test_small_coordinate_in_url(self) -> None:
        url = CurrentWeatherQueryBuilder().with_lat_lon((0.00001, 8.0)).build().to_url(HOST)
        assert url == f"{HOST}/current_weather?lat=0.00001&lon=8.0"

    def test_param_order(self) -> None:
        query = (
            CurrentWeatherQueryBuilder()
            .with_units(UnitType.DWD)
            .with_tz("Europe/Berlin")
            .with_source_id([1234])
            .with_wmo_station_id(["10315"])
            .with_dwd_station_id(["01766"])
            .with_max_dist(10_000)
            .with_lat_lon((52.0, 7.6))
            .build()
        )
        assert query.params() == [
            ("lat", "52.0"),
            ("lon", "7.6"),
            ("max_dist", "10000"),
            ("dwd_station_id", "01766"),
            ("wmo_station_id", "10315"),
            ("source_id", "1234"),
            ("tz", "Europe/Berlin"),
            ("units", "dwd"),
        ]

    def test_repeated_station_ids(self) -> None:
        url = CurrentWeatherQueryBuilder().with_dwd_station_id(["01766", "00420"]).to_url(HOST)
        assert _query(url) == [("dwd_station_id", "01766"), ("dwd_station_id", "00420")]

    def test_max_dist_limit(self) -> None:
        CurrentWeatherQueryBuilder().with_max_dist(500_000).build()
        with pytest.raises(InvalidMaxDistanceError) as exc_info:
            CurrentWeatherQueryBuilder().with_max_dist(500_001).build()
        assert exc_info.value.value == 500_001

    def test_negative_max_dist(self) -> None:
        with pytest.raises(InvalidMaxDistanceError):
            CurrentWeatherQueryBuilder().with_max_dist(-1).build()


# =============================================================================
# /weather
# =============================================================================


class TestWeatherQuery:
    def test_response_model(self) -> None:
        assert WeatherQueryBuilder.response_model is WeatherResponse

    def test_date_required(self) -> None:
        with pytest.raises(DateNotSetError, match="Date is required"):
            WeatherQueryBuilder().with_lat_lon((52.52, 13.4)).build()

    def test_date_checked_before_location(self) -> None:
        with pytest.raises(DateNotSetError):
            WeatherQueryBuilder().with_lat_lon((91.0, 13.4)).build()

    def test_date_range_url(self) -> None:
        query = (
            WeatherQueryBuilder()
            .with_date(date(2023, 8, 7))
            .with_last_date(date(2023, 8, 8))
            .with_lat_lon((52.52, 13.4))
            .build()
        )
        assert query.to_url(HOST) == (
            f"{HOST}/weather?date=2023-08-07&last_date=2023-08-08&lat=52.52&lon=13.4"
        )

    def test_datetime_rendered_iso(self) -> None:
        query = WeatherQueryBuilder().with_date(datetime(2023, 8, 7, 12, 30)).build()
        assert query.params() == [("date", "2023-08-07T12:30:00")]

    def test_station_filters(self) -> None:
        query = (
            WeatherQueryBuilder()
            .with_date(date(2023, 8, 7))
            .with_wmo_station_id(["10315", "10338"])
            .with_source_id([1, 2])
            .with_units(UnitType.SI)
            .build()
        )
        assert query.params() == [
            ("date", "2023-08-07"),
            ("wmo_station_id", "10315"),
            ("wmo_station_id", "10338"),
            ("source_id", "1"),
            ("source_id", "2"),
            ("units", "si"),
        ]

    def test_max_dist_validated(self) -> None:
        with pytest.raises(InvalidMaxDistanceError):
            WeatherQueryBuilder().with_date(date(2023, 8, 7)).with_max_dist(600_000).build()


# =============================================================================
# /radar
# =============================================================================


class TestRadarQuery:
    def test_response_model(self) -> None:
        assert RadarWeatherQueryBuilder.response_model is RadarResponse

    def test_full_param_order(self) -> None:
        query = (
            RadarWeatherQueryBuilder()
            .with_tz("Europe/Berlin")
            .with_compression_format(RadarCompressionFormat.COMPRESSED)
            .with_last_date(date(2023, 8, 7))
            .with_date(date(2023, 8, 7))
            .with_distance(50_000)
            .with_lat_lon((52.0, 7.6))
            .build()
        )
        assert query.params() == [
            ("lat", "52.0"),
            ("lon", "7.6"),
            ("distance", "50000"),
            ("date", "2023-08-07"),
            ("last_date", "2023-08-07"),
            ("format", "compressed"),
            ("tz", "Europe/Berlin"),
        ]

    def test_bbox_joined(self) -> None:
        url = RadarWeatherQueryBuilder().with_bbox([100, 100, 300, 300]).build().to_url(HOST)
        assert _query(url) == [("bbox", "100,100,300,300")]

    @pytest.mark.parametrize("fmt", list(RadarCompressionFormat))
    def test_format_values(self, fmt: RadarCompressionFormat) -> None:
        query = RadarWeatherQueryBuilder().with_compression_format(fmt)
        assert query.params() == [("format", fmt.value)]

    def test_bbox_width(self) -> None:
        assert RadarWeatherQueryBuilder().with_bbox([100, 150, 300, 350]).bbox_width() == 200
        assert RadarWeatherQueryBuilder().bbox_width() is None

    def test_bbox_must_have_four_values(self) -> None:
        with pytest.raises(InvalidBboxError):
            RadarWeatherQueryBuilder().with_bbox([1, 2, 3]).build()

    def test_negative_distance(self) -> None:
        with pytest.raises(InvalidDistanceError):
            RadarWeatherQueryBuilder().with_distance(-5).build()

    def test_no_params(self) -> None:
        assert RadarWeatherQueryBuilder().build().to_url(HOST) == f"{HOST}/radar"


# =============================================================================
# /alerts
# =============================================================================


class TestAlertsQuery:
    def test_response_model(self) -> None:
        assert AlertsQueryBuilder.response_model is AlertsResponse

    def test_param_order(self) -> None:
        query = (
            AlertsQueryBuilder()
            .with_tz("Europe/Berlin")
            .with_warn_cell_id(803159016)
            .with_lat_lon((52.0, 7.6))
            .build()
        )
        assert query.params() == [
            ("lat", "52.0"),
            ("lon", "7.6"),
            ("warn_cell_id", "803159016"),
            ("tz", "Europe/Berlin"),
        ]
