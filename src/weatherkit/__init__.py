"""weatherkit - typed, unit-aware models for weather API responses."""

__version__ = "0.1.0"

from .common import Known, Unknown
from .enums import (
    CompassPoint,
    MoonPhase,
    PrecipitationType,
    PressureTrend,
    UVIndex,
    WeatherCondition,
)
from .errors import (
    InvalidField,
    InvalidTimestamp,
    InvalidTimezone,
    MissingField,
    OutOfRange,
    UnsupportedConversion,
    WeatherKitError,
)
from .forecasts import CurrentWeather, Day, DayPart, Forecast, Hour, Minute
from .measurements import (
    CloudCover,
    Direction,
    Humidity,
    Measurement,
    Precipitation,
    PrecipitationChance,
    PrecipitationIntensity,
    Pressure,
    Temperature,
    Visibility,
    Wind,
)
from .units import (
    AngleUnit,
    LengthUnit,
    PercentageUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
    UnitConverter,
)

# Define what gets imported with: from weatherkit import *
__all__ = [
    "AngleUnit",
    "CloudCover",
    "CompassPoint",
    "CurrentWeather",
    "Day",
    "DayPart",
    "Direction",
    "Forecast",
    "Hour",
    "Humidity",
    "InvalidField",
    "InvalidTimestamp",
    "InvalidTimezone",
    "Known",
    "LengthUnit",
    "Measurement",
    "Minute",
    "MissingField",
    "MoonPhase",
    "OutOfRange",
    "PercentageUnit",
    "Precipitation",
    "PrecipitationChance",
    "PrecipitationIntensity",
    "PrecipitationRateUnit",
    "PrecipitationType",
    "Pressure",
    "PressureTrend",
    "PressureUnit",
    "SpeedUnit",
    "Temperature",
    "TemperatureUnit",
    "UVIndex",
    "Unknown",
    "UnitConverter",
    "UnsupportedConversion",
    "Visibility",
    "WeatherCondition",
    "WeatherKitError",
    "Wind",
]
