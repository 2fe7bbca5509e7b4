"""Unit-aware measurement value objects."""

from .base import Measurement, PercentageMeasurement
from .weather import (
    CloudCover,
    Direction,
    Humidity,
    Precipitation,
    PrecipitationChance,
    PrecipitationIntensity,
    Pressure,
    Temperature,
    Visibility,
    Wind,
)

__all__ = [
    "CloudCover",
    "Direction",
    "Humidity",
    "Measurement",
    "PercentageMeasurement",
    "Precipitation",
    "PrecipitationChance",
    "PrecipitationIntensity",
    "Pressure",
    "Temperature",
    "Visibility",
    "Wind",
]
