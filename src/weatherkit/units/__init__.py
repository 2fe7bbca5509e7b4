"""Unit families and conversion tables."""

from weatherkit.units.converter import UnitConverter
from weatherkit.units.families import (
    UNIT_FAMILIES,
    AngleUnit,
    AnyUnit,
    LengthUnit,
    PercentageUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
)

__all__ = [
    "UNIT_FAMILIES",
    "AngleUnit",
    "AnyUnit",
    "LengthUnit",
    "PercentageUnit",
    "PrecipitationRateUnit",
    "PressureUnit",
    "SpeedUnit",
    "TemperatureUnit",
    "UnitConverter",
]
