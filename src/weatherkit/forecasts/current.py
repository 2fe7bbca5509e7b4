from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from weatherkit.common.lookup import Known, Unknown
from weatherkit.enums import UVIndex, WeatherCondition
from weatherkit.forecasts.base import FieldReader, Snapshot
from weatherkit.forecasts.bundles import TemperatureConditions, WindConditions, read_pressure
from weatherkit.measurements import (
    CloudCover,
    Humidity,
    PrecipitationIntensity,
    Pressure,
    Visibility,
)


class CurrentWeather(Snapshot):
    """Current weather conditions (``currentWeather``)."""

    SOURCE: ClassVar[str] = "currentWeather"

    as_of: datetime
    cloud_cover: CloudCover
    condition: Known[WeatherCondition] | Unknown
    daylight: bool | None = None
    humidity: Humidity
    precipitation_intensity: PrecipitationIntensity | None = None
    pressure: Pressure
    temperature: TemperatureConditions
    uv_index: UVIndex
    uv_index_value: int
    visibility: Visibility
    wind: WindConditions

    @classmethod
    def _parse(cls, reader: FieldReader) -> dict[str, Any]:
        uv_value, uv_index = reader.uv_index("uvIndex")
        return {
            "as_of": reader.timestamp("asOf"),
            "cloud_cover": reader.percentage(CloudCover, "cloudCover"),
            "condition": reader.lookup(WeatherCondition, "conditionCode"),
            "daylight": reader.optional("daylight"),
            "humidity": reader.percentage(Humidity, "humidity"),
            "precipitation_intensity": reader.optional_measurement(
                PrecipitationIntensity, "precipitationIntensity"
            ),
            "pressure": read_pressure(reader),
            "temperature": TemperatureConditions.read(reader),
            "uv_index": uv_index,
            "uv_index_value": uv_value,
            "visibility": reader.measurement(Visibility, "visibility"),
            "wind": WindConditions.read(reader),
        }
