"""Plain-text rendering of parsed forecasts."""

from __future__ import annotations

from typing import Optional

from weatherkit.common.lookup import Known, Unknown
from weatherkit.forecasts import CurrentWeather, Day, Forecast, Hour
from weatherkit.forecasts.bundles import WindConditions
from weatherkit.measurements import Measurement
from weatherkit.settings import DisplaySettings
from weatherkit.utils import TimeUtils


def describe(lookup: Known | Unknown) -> str:
    """Label of a matched code, or the raw code in brackets."""
    if isinstance(lookup, Known):
        return str(lookup.variant)
    return f"[{lookup.raw}]"


class ForecastTextRenderer:
    """Turns forecast snapshots into display lines.

    The renderer:
    - Converts every measurement into the unit system from settings
    - Rounds to the configured number of decimals
    - Formats dates and times with the configured formats
    - Slices hourly and daily data to the configured counts
    """

    def __init__(self, settings: Optional[DisplaySettings] = None) -> None:
        self.settings = settings or DisplaySettings()

    def measurement(self, m: Measurement) -> str:
        """Format a measurement in the preferred unit of its family."""
        unit = self.settings.preferred_unit(type(m.unit))
        return m.format(unit, self.settings.decimals)

    def wind(self, wind: WindConditions) -> str:
        text = self.measurement(wind.speed)
        if wind.direction is not None:
            text += f" {wind.direction.compass_name}"
        if wind.gust is not None:
            text += f" (gusts {self.measurement(wind.gust)})"
        return text

    def current_line(self, current: CurrentWeather) -> str:
        time = TimeUtils.format_datetime(current.as_of, self.settings.time_format_hourly)
        return (
            f"Now ({time}): {describe(current.condition)}, "
            f"{self.measurement(current.temperature.actual)} "
            f"(feels like {self.measurement(current.temperature.apparent)}), "
            f"humidity {self.measurement(current.humidity)}, "
            f"wind {self.wind(current.wind)}, "
            f"pressure {self.measurement(current.pressure)}, "
            f"UV {current.uv_index_value} {current.uv_index}"
        )

    def hour_line(self, hour: Hour) -> str:
        time = TimeUtils.format_datetime(hour.forecast_time, self.settings.time_format_hourly)
        return (
            f"{time}  {describe(hour.condition)}, "
            f"{self.measurement(hour.temperature.actual)}, "
            f"precip {self.measurement(hour.precipitation.chance)}, "
            f"wind {self.wind(hour.wind)}"
        )

    def day_line(self, day: Day) -> str:
        date = TimeUtils.format_datetime(day.forecast_start, self.settings.time_format_daily)
        return (
            f"{date}  {describe(day.condition)}, "
            f"{self.measurement(day.temperature_min)} / {self.measurement(day.temperature_max)}, "
            f"precip {self.measurement(day.precipitation.chance)}, "
            f"UV max {day.uv_index_value} {day.uv_index}, "
            f"moon {describe(day.moon_phase)}"
        )

    def render(self, forecast: Forecast) -> list[str]:
        """Render every dataset present in ``forecast``."""
        lines: list[str] = []
        if forecast.current is not None:
            lines.append(self.current_line(forecast.current))
        if forecast.hourly:
            lines.append("")
            lines.append("Hourly")
            lines.extend(
                self.hour_line(h) for h in forecast.filter_hourly(self.settings.hourly_count)
            )
        if forecast.daily:
            lines.append("")
            lines.append("Daily")
            lines.extend(self.day_line(d) for d in forecast.daily[: self.settings.daily_count])
        return lines
