from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from weatherkit.common.lookup import Known, Unknown
from weatherkit.enums import MoonPhase, UVIndex, WeatherCondition
from weatherkit.forecasts.base import FieldReader, Snapshot
from weatherkit.forecasts.bundles import PrecipitationConditions, WindConditions
from weatherkit.measurements import CloudCover, Humidity, Temperature
from weatherkit.units import TemperatureUnit


class DayPart(Snapshot):
    """Daytime (7:00-19:00) or overnight (19:00-7:00) part of a day."""

    SOURCE: ClassVar[str] = "forecastDaily.dayPart"

    forecast_start: datetime
    forecast_end: datetime
    cloud_cover: CloudCover
    condition: Known[WeatherCondition] | Unknown
    humidity: Humidity
    precipitation: PrecipitationConditions
    wind: WindConditions

    @classmethod
    def _parse(cls, reader: FieldReader) -> dict[str, Any]:
        return {
            "forecast_start": reader.timestamp("forecastStart"),
            "forecast_end": reader.timestamp("forecastEnd"),
            "cloud_cover": reader.percentage(CloudCover, "cloudCover"),
            "condition": reader.lookup(WeatherCondition, "conditionCode"),
            "humidity": reader.percentage(Humidity, "humidity"),
            "precipitation": PrecipitationConditions.read(reader),
            "wind": WindConditions.read(reader),
        }


class Day(Snapshot):
    """Daily forecast data (one entry of ``forecastDaily.days``)."""

    SOURCE: ClassVar[str] = "forecastDaily"

    forecast_start: datetime
    forecast_end: datetime
    condition: Known[WeatherCondition] | Unknown
    uv_index: UVIndex
    uv_index_value: int
    moon_phase: Known[MoonPhase] | Unknown
    precipitation: PrecipitationConditions
    temperature_max: Temperature
    temperature_min: Temperature
    # Absent in polar day/night
    sunrise: datetime | None = None
    sunset: datetime | None = None
    moonrise: datetime | None = None
    moonset: datetime | None = None
    daytime: DayPart | None = None
    overnight: DayPart | None = None

    @classmethod
    def _parse(cls, reader: FieldReader) -> dict[str, Any]:
        uv_value, uv_index = reader.uv_index("maxUvIndex")
        return {
            "forecast_start": reader.timestamp("forecastStart"),
            "forecast_end": reader.timestamp("forecastEnd"),
            "condition": reader.lookup(WeatherCondition, "conditionCode"),
            "uv_index": uv_index,
            "uv_index_value": uv_value,
            "moon_phase": reader.lookup(MoonPhase, "moonPhase"),
            "precipitation": PrecipitationConditions.read(reader),
            "temperature_max": reader.measurement(Temperature, "temperatureMax"),
            "temperature_min": reader.measurement(Temperature, "temperatureMin"),
            "sunrise": reader.optional_timestamp("sunrise"),
            "sunset": reader.optional_timestamp("sunset"),
            "moonrise": reader.optional_timestamp("moonrise"),
            "moonset": reader.optional_timestamp("moonset"),
            "daytime": cls._part(reader, "daytimeForecast"),
            "overnight": cls._part(reader, "overnightForecast"),
        }

    @staticmethod
    def _part(reader: FieldReader, key: str) -> DayPart | None:
        data = reader.optional(key)
        if data is None:
            return None
        return DayPart._from_reader(FieldReader(data, reader.timezone, f"{reader.snapshot}.{key}"))

    @property
    def daylight_hours(self) -> float | None:
        """Hours between sunrise and sunset, if both are known."""
        if self.sunrise is None or self.sunset is None:
            return None
        delta = self.sunset - self.sunrise
        return delta.total_seconds() / 3600

    def temperature_range(self, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> float:
        """Difference between the day's max and min temperatures."""
        return self.temperature_max.get_value(unit) - self.temperature_min.get_value(unit)
