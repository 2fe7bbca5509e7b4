"""Exception classes for parsing weather API payloads.

This module defines the hierarchy raised while turning raw JSON into
measurements, enumerations and forecast snapshots. Unrecognised enum codes
are not errors; they degrade to ``Unknown`` lookups instead.
"""

from __future__ import annotations

from typing import Any, Optional


class WeatherKitError(Exception):
    """Base error for everything raised by weatherkit.

    Carries a human-readable message and, when the error wraps another
    exception, the original error for debugging.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that was caught, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[Exception] = original_error


class MissingField(WeatherKitError):
    """Raised when a field the upstream schema always sends is absent."""

    def __init__(self, field: str, snapshot: str | None = None) -> None:
        """Initialize with the name of the missing field.

        Args:
            field: JSON key that was expected
            snapshot: Name of the snapshot being built, if known
        """
        where = f" in {snapshot}" if snapshot else ""
        super().__init__(f"Missing required field '{field}'{where}")
        self.field = field
        self.snapshot = snapshot


class InvalidField(WeatherKitError):
    """Raised when a present field holds a value of the wrong type or range."""

    pass


class InvalidTimestamp(WeatherKitError):
    """Raised when a forecast time is not a valid ISO-8601 string."""

    def __init__(self, raw: Any, original_error: Optional[Exception] = None) -> None:
        super().__init__(f"Invalid ISO-8601 timestamp: {raw!r}", original_error)
        self.raw = raw


class InvalidTimezone(WeatherKitError):
    """Raised when a timezone name cannot be resolved."""

    def __init__(self, name: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(f"Unknown timezone: {name!r}", original_error)
        self.name = name


class OutOfRange(WeatherKitError):
    """Raised when an ordinal enum value falls outside its defined domain."""

    def __init__(self, value: int, lower: int, upper: int) -> None:
        """Initialize with the offending value and the valid bounds.

        Args:
            value: Value that was rejected
            lower: Smallest accepted value (inclusive)
            upper: Largest accepted value (inclusive)
        """
        super().__init__(f"Value {value} is outside the range {lower}-{upper}")
        self.value = value
        self.lower = lower
        self.upper = upper


class UnsupportedConversion(WeatherKitError):
    """Raised when converting a measurement into a unit of another family."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(
            f"Cannot convert {type(source).__name__}.{source.name} "
            f"to {type(target).__name__}.{getattr(target, 'name', target)}"
        )
        self.source = source
        self.target = target
