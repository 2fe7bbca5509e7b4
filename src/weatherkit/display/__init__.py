"""Presentation of parsed forecasts."""

from .text import ForecastTextRenderer, describe

__all__ = ["ForecastTextRenderer", "describe"]
