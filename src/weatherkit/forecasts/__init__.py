"""Forecast snapshots built from weather API JSON."""

from .base import FieldReader, Snapshot
from .bundles import PrecipitationConditions, TemperatureConditions, WindConditions
from .current import CurrentWeather
from .day import Day, DayPart
from .hour import Hour
from .minute import Minute
from .response import Forecast

__all__ = [
    "CurrentWeather",
    "Day",
    "DayPart",
    "FieldReader",
    "Forecast",
    "Hour",
    "Minute",
    "PrecipitationConditions",
    "Snapshot",
    "TemperatureConditions",
    "WindConditions",
]
