from __future__ import annotations

from enum import Enum

from weatherkit.units.converter import UnitConverter


class CompassPoint(Enum):
    """The 16 points of the compass, clockwise from north."""

    N = ("N", "North")
    NNE = ("NNE", "North-northeast")
    NE = ("NE", "Northeast")
    ENE = ("ENE", "East-northeast")
    E = ("E", "East")
    ESE = ("ESE", "East-southeast")
    SE = ("SE", "Southeast")
    SSE = ("SSE", "South-southeast")
    S = ("S", "South")
    SSW = ("SSW", "South-southwest")
    SW = ("SW", "Southwest")
    WSW = ("WSW", "West-southwest")
    W = ("W", "West")
    WNW = ("WNW", "West-northwest")
    NW = ("NW", "Northwest")
    NNW = ("NNW", "North-northwest")

    def __init__(self, abbreviation: str, full_name: str) -> None:
        self.abbreviation = abbreviation
        self.full_name = full_name

    def __str__(self) -> str:
        return self.abbreviation

    @classmethod
    def from_bearing(cls, deg: float) -> CompassPoint:
        """Nearest compass point for a bearing in degrees."""
        return list(cls)[UnitConverter.compass_index(deg)]
