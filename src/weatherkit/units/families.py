"""Unit families.

Each family is a closed ``Enum`` of unit variants measuring the same physical
quantity. Variants only describe themselves; conversion factors live in
:mod:`weatherkit.units.converter`.
"""

from __future__ import annotations

from enum import Enum


class UnitMixin:
    """Shared behaviour for unit variants.

    Enum members are declared as ``(full_name, abbreviation)`` tuples which
    the enum machinery unpacks into ``__init__``.
    """

    full_name: str
    abbreviation: str

    def __init__(self, full_name: str, abbreviation: str) -> None:
        self.full_name = full_name
        self.abbreviation = abbreviation

    def __str__(self) -> str:
        return self.abbreviation


class TemperatureUnit(UnitMixin, Enum):
    """Temperature scales."""

    CELSIUS = ("Celsius", "°C")
    FAHRENHEIT = ("Fahrenheit", "°F")
    KELVIN = ("Kelvin", "K")


class SpeedUnit(UnitMixin, Enum):
    """Speeds, used for wind."""

    METER_PER_SECOND = ("Meter per second", "m/s")
    KILOMETER_PER_HOUR = ("Kilometer per hour", "km/h")
    KILOMETER_PER_SECOND = ("Kilometer per second", "km/s")
    MILE_PER_HOUR = ("Mile per hour", "mph")
    FOOT_PER_SECOND = ("Foot per second", "ft/s")
    KNOT = ("Knot", "kn")


class PressureUnit(UnitMixin, Enum):
    """Atmospheric pressure."""

    HECTOPASCAL = ("Hectopascal", "hPa")
    MILLIBAR = ("Millibar", "mbar")
    KILOPASCAL = ("Kilopascal", "kPa")
    INCH_OF_MERCURY = ("Inch of mercury", "inHg")
    MILLIMETER_OF_MERCURY = ("Millimeter of mercury", "mmHg")
    POUND_PER_SQUARE_INCH = ("Pound per square inch", "psi")


class LengthUnit(UnitMixin, Enum):
    """Distances and depths (visibility, precipitation amounts)."""

    METER = ("Meter", "m")
    KILOMETER = ("Kilometer", "km")
    MILE = ("Mile", "mi")
    FOOT = ("Foot", "ft")
    MILLIMETER = ("Millimeter", "mm")
    CENTIMETER = ("Centimeter", "cm")
    INCH = ("Inch", "in")


class PrecipitationRateUnit(UnitMixin, Enum):
    """Precipitation intensity."""

    MILLIMETER_PER_HOUR = ("Millimeter per hour", "mm/h")
    INCH_PER_HOUR = ("Inch per hour", "in/h")


class PercentageUnit(UnitMixin, Enum):
    """Ratios on the 0-100 scale (humidity, cloud cover, chances)."""

    PERCENT = ("Percent", "%")


class AngleUnit(UnitMixin, Enum):
    """Compass bearings."""

    DEGREE = ("Degree", "°")


UNIT_FAMILIES: tuple[type[Enum], ...] = (
    TemperatureUnit,
    SpeedUnit,
    PressureUnit,
    LengthUnit,
    PrecipitationRateUnit,
    PercentageUnit,
    AngleUnit,
)

AnyUnit = (
    TemperatureUnit
    | SpeedUnit
    | PressureUnit
    | LengthUnit
    | PrecipitationRateUnit
    | PercentageUnit
    | AngleUnit
)
