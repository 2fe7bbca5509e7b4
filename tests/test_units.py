from enum import Enum

import pytest

from weatherkit.types import Unit
from weatherkit.units import (
    UNIT_FAMILIES,
    AngleUnit,
    LengthUnit,
    PercentageUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
)


@pytest.mark.parametrize(
    "unit, name, abbreviation",
    [
        (TemperatureUnit.CELSIUS, "Celsius", "°C"),
        (TemperatureUnit.FAHRENHEIT, "Fahrenheit", "°F"),
        (TemperatureUnit.KELVIN, "Kelvin", "K"),
        (SpeedUnit.METER_PER_SECOND, "Meter per second", "m/s"),
        (SpeedUnit.KILOMETER_PER_HOUR, "Kilometer per hour", "km/h"),
        (SpeedUnit.KILOMETER_PER_SECOND, "Kilometer per second", "km/s"),
        (SpeedUnit.MILE_PER_HOUR, "Mile per hour", "mph"),
        (SpeedUnit.FOOT_PER_SECOND, "Foot per second", "ft/s"),
        (SpeedUnit.KNOT, "Knot", "kn"),
        (PressureUnit.HECTOPASCAL, "Hectopascal", "hPa"),
        (PressureUnit.MILLIBAR, "Millibar", "mbar"),
        (PressureUnit.KILOPASCAL, "Kilopascal", "kPa"),
        (PressureUnit.INCH_OF_MERCURY, "Inch of mercury", "inHg"),
        (PressureUnit.MILLIMETER_OF_MERCURY, "Millimeter of mercury", "mmHg"),
        (PressureUnit.POUND_PER_SQUARE_INCH, "Pound per square inch", "psi"),
        (LengthUnit.METER, "Meter", "m"),
        (LengthUnit.KILOMETER, "Kilometer", "km"),
        (LengthUnit.MILE, "Mile", "mi"),
        (LengthUnit.FOOT, "Foot", "ft"),
        (LengthUnit.MILLIMETER, "Millimeter", "mm"),
        (LengthUnit.CENTIMETER, "Centimeter", "cm"),
        (LengthUnit.INCH, "Inch", "in"),
        (PrecipitationRateUnit.MILLIMETER_PER_HOUR, "Millimeter per hour", "mm/h"),
        (PrecipitationRateUnit.INCH_PER_HOUR, "Inch per hour", "in/h"),
        (PercentageUnit.PERCENT, "Percent", "%"),
        (AngleUnit.DEGREE, "Degree", "°"),
    ],
)
def test_unit_literals(unit: Unit, name: str, abbreviation: str) -> None:
    assert unit.full_name == name
    assert unit.abbreviation == abbreviation
    assert str(unit) == abbreviation


def test_every_unit_satisfies_protocol() -> None:
    for family in UNIT_FAMILIES:
        for unit in family:
            assert isinstance(unit, Unit)


def test_unit_equality_is_by_identity() -> None:
    assert SpeedUnit.KILOMETER_PER_HOUR == SpeedUnit.KILOMETER_PER_HOUR
    assert SpeedUnit.KILOMETER_PER_HOUR != SpeedUnit.KILOMETER_PER_SECOND
    # Same abbreviation in different families never compares equal
    assert LengthUnit.METER.abbreviation == "m"
    assert LengthUnit.METER != "m"


def test_families_are_closed_enums() -> None:
    assert all(issubclass(family, Enum) for family in UNIT_FAMILIES)
    assert len(SpeedUnit) == 6
    assert len(TemperatureUnit) == 3
    assert list(PercentageUnit) == [PercentageUnit.PERCENT]
