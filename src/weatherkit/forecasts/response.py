"""Top-level container for a full weather API payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import tzinfo
from typing import Any, Final

from pydantic import BaseModel, ConfigDict

from weatherkit.enums import WeatherCondition
from weatherkit.errors import InvalidField
from weatherkit.forecasts.current import CurrentWeather
from weatherkit.forecasts.day import Day
from weatherkit.forecasts.hour import Hour
from weatherkit.forecasts.minute import Minute
from weatherkit.units import TemperatureUnit
from weatherkit.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


class Forecast(BaseModel):
    """Weather data container parsed from a weather API response.

    Organizes the datasets that were requested (current conditions, next
    hour, hourly, daily) into typed snapshots. Datasets missing from the
    payload come back empty rather than failing.
    """

    model_config = ConfigDict(frozen=True)

    current: CurrentWeather | None = None
    next_hour: list[Minute] = []
    hourly: list[Hour] = []
    daily: list[Day] = []

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], timezone: str | tzinfo) -> Forecast:
        """Build every dataset present in ``payload``.

        Args:
            payload: Decoded JSON response
            timezone: IANA zone name or tzinfo used to localise timestamps

        Returns:
            Forecast with one snapshot per period

        Raises:
            WeatherKitError: If any snapshot fails to build
        """
        if not isinstance(payload, Mapping):
            raise InvalidField(f"Payload must be a JSON object, got {type(payload).__name__}")
        tz = TimeUtils.resolve_timezone(timezone)

        current_data = payload.get("currentWeather")
        forecast = cls(
            current=(
                CurrentWeather.from_json(current_data, tz) if current_data is not None else None
            ),
            next_hour=[
                Minute.from_json(m, tz) for m in _dataset(payload, "forecastNextHour", "minutes")
            ],
            hourly=[Hour.from_json(h, tz) for h in _dataset(payload, "forecastHourly", "hours")],
            daily=[Day.from_json(d, tz) for d in _dataset(payload, "forecastDaily", "days")],
        )
        logger.debug(
            "Parsed forecast: current=%s, %d minutes, %d hours, %d days",
            forecast.current is not None,
            len(forecast.next_hour),
            len(forecast.hourly),
            len(forecast.daily),
        )
        return forecast

    def filter_hourly(self, hours: int = 24) -> list[Hour]:
        """Get a filtered list of hourly forecasts.

        Args:
            hours: Number of hours to include

        Returns:
            Filtered list of hourly forecasts
        """
        return self.hourly[:hours]

    def get_daily_min_max(
        self, unit: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> tuple[float, float] | None:
        """Get the minimum and maximum temperatures across the daily forecast.

        Returns:
            Tuple of (min_temp, max_temp), or None without daily data
        """
        if not self.daily:
            return None

        min_temp = min(day.temperature_min.get_value(unit) for day in self.daily)
        max_temp = max(day.temperature_max.get_value(unit) for day in self.daily)
        return (min_temp, max_temp)

    @property
    def current_condition(self) -> WeatherCondition | None:
        """Get the current weather condition, if known."""
        if self.current is None:
            return None
        return self.current.condition.get()


def _dataset(payload: Mapping[str, Any], name: str, key: str) -> list[Any]:
    block = payload.get(name)
    if block is None:
        return []
    if not isinstance(block, Mapping) or not isinstance(block.get(key, []), list):
        raise InvalidField(f"'{name}.{key}' must be a list of JSON objects")
    return block.get(key, [])
