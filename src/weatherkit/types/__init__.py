"""Type definitions for weatherkit."""

from .units import Unit

__all__ = ["Unit"]
