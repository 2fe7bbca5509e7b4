from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from weatherkit.common.lookup import Known, Unknown
from weatherkit.enums import UVIndex, WeatherCondition
from weatherkit.forecasts.base import FieldReader, Snapshot
from weatherkit.forecasts.bundles import (
    PrecipitationConditions,
    TemperatureConditions,
    WindConditions,
    read_pressure,
)
from weatherkit.measurements import CloudCover, Humidity, Pressure, Visibility


class Hour(Snapshot):
    """Hourly forecast data (one entry of ``forecastHourly.hours``)."""

    SOURCE: ClassVar[str] = "forecastHourly"

    forecast_time: datetime
    cloud_cover: CloudCover
    condition: Known[WeatherCondition] | Unknown
    daylight: bool | None = None
    humidity: Humidity
    precipitation: PrecipitationConditions
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
            "forecast_time": reader.timestamp("forecastStart"),
            "cloud_cover": reader.percentage(CloudCover, "cloudCover"),
            "condition": reader.lookup(WeatherCondition, "conditionCode"),
            "daylight": reader.optional("daylight"),
            "humidity": reader.percentage(Humidity, "humidity"),
            "precipitation": PrecipitationConditions.read(reader),
            "pressure": read_pressure(reader),
            "temperature": TemperatureConditions.read(reader),
            "uv_index": uv_index,
            "uv_index_value": uv_value,
            "visibility": reader.measurement(Visibility, "visibility"),
            "wind": WindConditions.read(reader),
        }

    @property
    def has_rain(self) -> bool:
        """Check if this hour has rain forecast."""
        condition = self.condition.get()
        return condition is not None and condition.is_rain

    @property
    def has_snow(self) -> bool:
        """Check if this hour has snow forecast."""
        condition = self.condition.get()
        return condition is not None and condition.is_snow
