"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import ClassVar, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from weatherkit.units import (
    AngleUnit,
    LengthUnit,
    PercentageUnit,
    PrecipitationRateUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
)

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


UnitSystem = Literal["metric", "imperial"]

# Preferred display unit per family and unit system
PREFERRED_UNITS: dict[UnitSystem, dict[type[Enum], Enum]] = {
    "metric": {
        TemperatureUnit: TemperatureUnit.CELSIUS,
        SpeedUnit: SpeedUnit.KILOMETER_PER_HOUR,
        PressureUnit: PressureUnit.HECTOPASCAL,
        LengthUnit: LengthUnit.KILOMETER,
        PrecipitationRateUnit: PrecipitationRateUnit.MILLIMETER_PER_HOUR,
        PercentageUnit: PercentageUnit.PERCENT,
        AngleUnit: AngleUnit.DEGREE,
    },
    "imperial": {
        TemperatureUnit: TemperatureUnit.FAHRENHEIT,
        SpeedUnit: SpeedUnit.MILE_PER_HOUR,
        PressureUnit: PressureUnit.INCH_OF_MERCURY,
        LengthUnit: LengthUnit.MILE,
        PrecipitationRateUnit: PrecipitationRateUnit.INCH_PER_HOUR,
        PercentageUnit: PercentageUnit.PERCENT,
        AngleUnit: AngleUnit.DEGREE,
    },
}


class DisplaySettings(BaseModel):
    """How parsed forecasts are presented: unit system, timezone, rounding
    and time formats. These values can be overridden in config.yaml.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/weatherkit/config.yaml").expanduser(),
    ]

    units: UnitSystem = "metric"
    timezone: str = Field("UTC", description="Zone forecast times are localised into")
    decimals: int | None = Field(
        1, ge=0, le=6, description="Decimals shown for measurements; null keeps full precision"
    )

    # Forecast slices
    hourly_count: int = Field(12, ge=1, le=240, description="Hours to show")
    daily_count: int = Field(7, ge=1, le=10, description="Days to show")

    # Time formatting
    time_format_hourly: str = Field("%H:%M", description="Hourly forecast time format")
    time_format_daily: str = Field("%a %d %b", description="Daily forecast date format")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {v!r}") from exc
        return v

    # ---- convenience methods ----
    def get_timezone(self) -> ZoneInfo:
        """Get configured timezone as ZoneInfo object."""
        return ZoneInfo(self.timezone)

    def preferred_unit(self, family: type[Enum]) -> Enum:
        """Unit used to display measurements of ``family``."""
        return PREFERRED_UNITS[self.units][family]

    @property
    def is_metric(self) -> bool:
        """Whether the user has selected metric units."""
        return self.units == "metric"

    @classmethod
    def load(cls, path: Path | None = None) -> DisplaySettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated DisplaySettings object; defaults when no file exists
            and no path was given

        Raises:
            FileNotFoundError: If WEATHERKIT_CONFIG points at a missing file
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("WEATHERKIT_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from WEATHERKIT_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    return cls()

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
