"""Unit conversion tables and helpers."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, NamedTuple

from weatherkit.errors import UnsupportedConversion
from weatherkit.units.families import (
    AngleUnit,
    LengthUnit,
    PercentageUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
)


class Affine(NamedTuple):
    """Transform into a family's base unit: ``base = (value + offset) * num / den``.

    Leaving the base applies the inverse, ``value = base * den / num - offset``,
    so Celsius to Fahrenheit evaluates exactly as ``c * 9 / 5 + 32``.
    """

    num: float
    den: float = 1.0
    offset: float = 0.0

    def to_base(self, value: float) -> float:
        return (value + self.offset) * self.num / self.den

    def from_base(self, base: float) -> float:
        return base * self.den / self.num - self.offset


class UnitConverter:
    """Conversions between sibling units of a family.

    Every unit maps to an affine transform into its family's base unit
    (Celsius, m/s, hPa, meter, mm/h, percent, degree). Converting between two
    units goes through the base, so any pair within a family is supported.

    Also includes conversions to user-friendly formats like
    compass sectors and Beaufort scale.
    """

    TRANSFORMS: ClassVar[dict[Enum, Affine]] = {
        # Temperature (base: Celsius)
        TemperatureUnit.CELSIUS: Affine(1),
        TemperatureUnit.FAHRENHEIT: Affine(5, 9, -32),
        TemperatureUnit.KELVIN: Affine(1, 1, -273.15),
        # Speed (base: m/s)
        SpeedUnit.METER_PER_SECOND: Affine(1),
        SpeedUnit.KILOMETER_PER_HOUR: Affine(1, 3.6),
        SpeedUnit.KILOMETER_PER_SECOND: Affine(1000),
        SpeedUnit.MILE_PER_HOUR: Affine(0.44704),
        SpeedUnit.FOOT_PER_SECOND: Affine(0.3048),
        SpeedUnit.KNOT: Affine(1852, 3600),
        # Pressure (base: hPa)
        PressureUnit.HECTOPASCAL: Affine(1),
        PressureUnit.MILLIBAR: Affine(1),
        PressureUnit.KILOPASCAL: Affine(10),
        PressureUnit.INCH_OF_MERCURY: Affine(33.8638866667),
        PressureUnit.MILLIMETER_OF_MERCURY: Affine(1.33322387415),
        PressureUnit.POUND_PER_SQUARE_INCH: Affine(68.9475729318),
        # Length (base: meter)
        LengthUnit.METER: Affine(1),
        LengthUnit.KILOMETER: Affine(1000),
        LengthUnit.MILE: Affine(1609.344),
        LengthUnit.FOOT: Affine(0.3048),
        LengthUnit.MILLIMETER: Affine(1, 1000),
        LengthUnit.CENTIMETER: Affine(1, 100),
        LengthUnit.INCH: Affine(0.0254),
        # Precipitation rate (base: mm/h)
        PrecipitationRateUnit.MILLIMETER_PER_HOUR: Affine(1),
        PrecipitationRateUnit.INCH_PER_HOUR: Affine(25.4),
        # Single-member families
        PercentageUnit.PERCENT: Affine(1),
        AngleUnit.DEGREE: Affine(1),
    }

    # Beaufort scale thresholds (mph)
    BEAUFORT_LIMITS: ClassVar[list[int]] = [1, 4, 7, 12, 18, 24, 31, 38, 46, 54, 63, 73]

    @classmethod
    def convert(cls, value: float, source: Enum, target: Enum) -> float:
        """Convert ``value`` expressed in ``source`` into ``target``.

        Args:
            value: Numeric value in the source unit
            source: Unit the value is expressed in
            target: Unit to convert into

        Returns:
            The converted value; ``value`` unchanged when both units are equal

        Raises:
            UnsupportedConversion: If the units belong to different families
        """
        if target is source:
            return value
        if type(target) is not type(source) or target not in cls.TRANSFORMS:
            raise UnsupportedConversion(source, target)

        return cls.TRANSFORMS[target].from_base(cls.TRANSFORMS[source].to_base(value))

    @classmethod
    def compass_index(cls, deg: float) -> int:
        """Index of the nearest of 16 compass sectors (edges go clockwise)."""
        return int((deg % 360) / 22.5 + 0.5) % 16

    @classmethod
    def beaufort_from_speed(cls, speed_mph: float) -> int:
        """Convert wind speed to Beaufort scale (0-12)."""
        for bft, lim in enumerate(cls.BEAUFORT_LIMITS):
            if speed_mph < lim:
                return bft
        return 12
