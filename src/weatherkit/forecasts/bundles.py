"""Typed groups of related measurements."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from weatherkit.common.lookup import Known, Unknown
from weatherkit.enums import PrecipitationType, PressureTrend
from weatherkit.forecasts.base import FieldReader
from weatherkit.measurements import (
    Direction,
    Precipitation,
    PrecipitationChance,
    PrecipitationIntensity,
    Pressure,
    Temperature,
    Wind,
)


class TemperatureConditions(BaseModel):
    """Actual, apparent ("feels like") and dew point temperatures."""

    model_config = ConfigDict(frozen=True)

    actual: Temperature
    apparent: Temperature
    dew_point: Temperature

    @classmethod
    def read(cls, reader: FieldReader) -> TemperatureConditions:
        return cls(
            actual=reader.measurement(Temperature, "temperature"),
            apparent=reader.measurement(Temperature, "temperatureApparent"),
            dew_point=reader.measurement(Temperature, "temperatureDewPoint"),
        )


class WindConditions(BaseModel):
    """Sustained wind speed with optional gust and bearing."""

    model_config = ConfigDict(frozen=True)

    speed: Wind
    gust: Wind | None = None
    direction: Direction | None = None

    @classmethod
    def read(cls, reader: FieldReader) -> WindConditions:
        return cls(
            speed=reader.measurement(Wind, "windSpeed"),
            gust=reader.optional_measurement(Wind, "windGust"),
            direction=reader.optional_measurement(Direction, "windDirection"),
        )


class PrecipitationConditions(BaseModel):
    """Precipitation forecast for a period.

    ``intensity`` and ``amount`` are ``None`` when the API leaves them out,
    which it does for periods without precipitation.
    """

    model_config = ConfigDict(frozen=True)

    type: Known[PrecipitationType] | Unknown
    chance: PrecipitationChance
    intensity: PrecipitationIntensity | None = None
    amount: Precipitation | None = None
    snowfall_intensity: PrecipitationIntensity | None = None
    snowfall_amount: Precipitation | None = None

    @classmethod
    def read(cls, reader: FieldReader) -> PrecipitationConditions:
        return cls(
            type=reader.lookup(PrecipitationType, "precipitationType"),
            chance=reader.percentage(PrecipitationChance, "precipitationChance"),
            intensity=reader.optional_measurement(PrecipitationIntensity, "precipitationIntensity"),
            amount=reader.optional_measurement(Precipitation, "precipitationAmount"),
            snowfall_intensity=reader.optional_measurement(
                PrecipitationIntensity, "snowfallIntensity"
            ),
            snowfall_amount=reader.optional_measurement(Precipitation, "snowfallAmount"),
        )

    @property
    def is_expected(self) -> bool:
        """Whether any precipitation is forecast."""
        return self.chance.value > 0 and self.type.get() is not PrecipitationType.CLEAR


def read_pressure(reader: FieldReader) -> Pressure:
    """Sea level pressure together with its trend."""
    return Pressure(
        reader.number("pressure"),
        trend=reader.lookup(PressureTrend, "pressureTrend"),
    )
