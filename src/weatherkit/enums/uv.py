from __future__ import annotations

from enum import Enum

from weatherkit.errors import OutOfRange


class UVIndex(Enum):
    """UV exposure risk category.

    Members are declared as ``(label, lowest index, highest index)``.
    """

    LOW = ("Low", 0, 2)
    MODERATE = ("Moderate", 3, 5)
    HIGH = ("High", 6, 7)
    VERY_HIGH = ("Very High", 8, 10)
    EXTREME = ("Extreme", 11, 11)

    def __init__(self, label: str, lower: int, upper: int) -> None:
        self.label = label
        self.lower = lower
        self.upper = upper

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_ordinal(cls, n: int) -> UVIndex:
        """Map a UV index (0-11) to its exposure category.

        Raises:
            OutOfRange: If ``n`` is not an integer between 0 and 11
        """
        for member in cls:
            if member.lower <= n <= member.upper:
                return member
        raise OutOfRange(n, cls.LOW.lower, cls.EXTREME.upper)
