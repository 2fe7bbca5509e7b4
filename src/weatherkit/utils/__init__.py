"""Common utility functions and helpers for the weatherkit package."""

from weatherkit.utils.formatting import format_number, format_quantity
from weatherkit.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "format_number",
    "format_quantity",
]
