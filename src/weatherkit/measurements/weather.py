"""Concrete weather measurements."""

from __future__ import annotations

import math

from pydantic import field_validator

from weatherkit.common.lookup import Known, Unknown
from weatherkit.enums import CompassPoint, PressureTrend
from weatherkit.measurements.base import Measurement, PercentageMeasurement
from weatherkit.units import (
    AngleUnit,
    LengthUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
    UnitConverter,
)


class Temperature(Measurement):
    """Air, apparent or dew point temperature."""

    unit: TemperatureUnit = TemperatureUnit.CELSIUS


class Wind(Measurement):
    """Wind speed or gust."""

    unit: SpeedUnit = SpeedUnit.KILOMETER_PER_HOUR

    @property
    def beaufort(self) -> int:
        """Beaufort number (0-12) for this speed."""
        return UnitConverter.beaufort_from_speed(self.get_value(SpeedUnit.MILE_PER_HOUR))


class Pressure(Measurement):
    """Sea level pressure, optionally with its trend."""

    unit: PressureUnit = PressureUnit.HECTOPASCAL
    trend: Known[PressureTrend] | Unknown | None = None


class Visibility(Measurement):
    """Distance at which objects can be discerned."""

    unit: LengthUnit = LengthUnit.METER


class Precipitation(Measurement):
    """Liquid-equivalent precipitation or snowfall amount."""

    unit: LengthUnit = LengthUnit.MILLIMETER


class PrecipitationIntensity(Measurement):
    """Precipitation or snowfall rate."""

    unit: PrecipitationRateUnit = PrecipitationRateUnit.MILLIMETER_PER_HOUR


class Humidity(PercentageMeasurement):
    """Relative humidity."""


class CloudCover(PercentageMeasurement):
    """Share of the sky covered by clouds."""


class PrecipitationChance(PercentageMeasurement):
    """Chance of precipitation."""


class Direction(Measurement):
    """Compass bearing the wind is blowing from.

    Bearings are normalised into ``[0, 360)``; 360 becomes 0 and negative
    bearings wrap around.
    """

    unit: AngleUnit = AngleUnit.DEGREE

    @field_validator("value")
    @classmethod
    def normalise_bearing(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("bearing must be a finite number")
        # Tiny negative bearings round up to 360.0 under modulo
        r = v % 360
        return 0.0 if r >= 360 else r

    @property
    def compass(self) -> CompassPoint:
        """Nearest of the 16 compass points."""
        return CompassPoint.from_bearing(self.value)

    @property
    def compass_name(self) -> str:
        """Abbreviation of the nearest compass point (e.g. ``"NNE"``)."""
        return self.compass.abbreviation
