"""Enumerations mapping raw API codes to typed values."""

from .categories import MoonPhase, PrecipitationType, PressureTrend
from .compass import CompassPoint
from .conditions import WeatherCondition
from .uv import UVIndex

__all__ = [
    "CompassPoint",
    "MoonPhase",
    "PrecipitationType",
    "PressureTrend",
    "UVIndex",
    "WeatherCondition",
]
