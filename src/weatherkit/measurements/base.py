"""Base class for unit-aware measurements."""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from weatherkit.units import AnyUnit, PercentageUnit, UnitConverter
from weatherkit.utils.formatting import format_quantity


class Measurement(BaseModel):
    """A numeric value paired with the unit it is expressed in.

    The value is stored exactly as given; conversions are computed on read
    and never change the instance. Subclasses narrow ``unit`` to a single
    family and give it a default.

    Examples:
        >>> t = Temperature(20)
        >>> t.get_value(TemperatureUnit.FAHRENHEIT)
        68.0
        >>> str(t)
        '20 °C'
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: AnyUnit

    def __init__(self, value: float, unit: Any = None, **data: Any) -> None:
        if unit is not None:
            data["unit"] = unit
        super().__init__(value=value, **data)

    def get_value(self, unit: Enum | None = None) -> float:
        """Return the value, converted into ``unit`` when given.

        Args:
            unit: Target unit; must belong to the same family as ``self.unit``

        Returns:
            The stored value if ``unit`` is omitted or equal to the stored
            unit, otherwise the converted value

        Raises:
            UnsupportedConversion: If ``unit`` belongs to another family
        """
        if unit is None:
            return self.value
        return UnitConverter.convert(self.value, self.unit, unit)

    def convert(self, unit: Enum) -> Self:
        """Return a copy of this measurement expressed in ``unit``."""
        return self.model_copy(update={"value": self.get_value(unit), "unit": unit})

    def format(self, unit: Enum | None = None, decimals: int | None = None) -> str:
        """Render as ``"{value} {abbreviation}"``.

        Args:
            unit: Convert into this unit first (default: stored unit)
            decimals: Round to this many decimals (default: full precision)
        """
        target = unit or self.unit
        return format_quantity(self.get_value(target), target, decimals)

    def __str__(self) -> str:
        return self.format()


class PercentageMeasurement(Measurement):
    """A ratio stored on the 0-100 scale. Conversion is a no-op."""

    value: float = Field(..., ge=0, le=100)
    unit: PercentageUnit = PercentageUnit.PERCENT

    @classmethod
    def from_fraction(cls, fraction: float) -> Self:
        """Create from an API fraction (0-1)."""
        return cls(fraction * 100)

    @property
    def fraction(self) -> float:
        """The value on the 0-1 scale."""
        return self.value / 100
