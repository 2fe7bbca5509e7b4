"""Text and number formatting utilities."""

from __future__ import annotations

from weatherkit.types.units import Unit


def format_number(value: float, decimals: int | None = None) -> str:
    """Format a number without losing precision unless asked to round.

    Args:
        value: Number to format
        decimals: Round to this many decimals; ``None`` keeps full precision

    Returns:
        Formatted number; integral values drop the trailing ``.0``
    """
    if decimals is not None:
        value = round(value, decimals)
        if decimals <= 0:
            return str(int(value))
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_quantity(value: float, unit: Unit, decimals: int | None = None) -> str:
    """Format a value with the abbreviation of its unit (e.g. ``"21.5 °C"``)."""
    return f"{format_number(value, decimals)} {unit.abbreviation}"

