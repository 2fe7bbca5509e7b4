"""Categorical fields: precipitation type, pressure trend, moon phase."""

from __future__ import annotations

from weatherkit.common.lookup import CodedEnum


class PrecipitationType(CodedEnum):
    """Kind of precipitation sent in ``precipitationType``."""

    CLEAR = ("clear", "No precipitation")
    PRECIPITATION = ("precipitation", "Precipitation")
    RAIN = ("rain", "Rain")
    SNOW = ("snow", "Snow")
    SLEET = ("sleet", "Sleet")
    HAIL = ("hail", "Hail")
    MIXED = ("mixed", "Mixed")


class PressureTrend(CodedEnum):
    """Direction of change sent in ``pressureTrend``."""

    RISING = ("rising", "Rising")
    FALLING = ("falling", "Falling")
    STEADY = ("steady", "Steady")


class MoonPhase(CodedEnum):
    """Moon phase sent in daily ``moonPhase`` fields."""

    NEW = ("new", "New Moon")
    WAXING_CRESCENT = ("waxingCrescent", "Waxing Crescent")
    FIRST_QUARTER = ("firstQuarter", "First Quarter")
    WAXING_GIBBOUS = ("waxingGibbous", "Waxing Gibbous")
    FULL = ("full", "Full Moon")
    WANING_GIBBOUS = ("waningGibbous", "Waning Gibbous")
    THIRD_QUARTER = ("thirdQuarter", "Last Quarter")
    WANING_CRESCENT = ("waningCrescent", "Waning Crescent")
