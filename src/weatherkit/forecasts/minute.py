from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from weatherkit.forecasts.base import FieldReader, Snapshot
from weatherkit.measurements import PrecipitationChance, PrecipitationIntensity


class Minute(Snapshot):
    """Minute-by-minute precipitation (one entry of ``forecastNextHour.minutes``)."""

    SOURCE: ClassVar[str] = "forecastNextHour"

    forecast_time: datetime
    precipitation_chance: PrecipitationChance
    precipitation_intensity: PrecipitationIntensity

    @classmethod
    def _parse(cls, reader: FieldReader) -> dict[str, Any]:
        return {
            "forecast_time": reader.timestamp("startTime"),
            "precipitation_chance": reader.percentage(PrecipitationChance, "precipitationChance"),
            "precipitation_intensity": reader.measurement(
                PrecipitationIntensity, "precipitationIntensity"
            ),
        }
