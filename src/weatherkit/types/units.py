"""Unit-related type definitions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Unit(Protocol):
    """Duck-type for a unit variant (full name, abbreviation, display string)."""

    full_name: str
    abbreviation: str

    def __str__(self) -> str: ...
