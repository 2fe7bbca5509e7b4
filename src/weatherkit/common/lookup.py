"""Explicit results for enum lookups by raw API code."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

logger: Final = logging.getLogger(__name__)

E = TypeVar("E")


class Known(BaseModel, Generic[E]):
    """A raw code that matched a member of the enum."""

    model_config = ConfigDict(frozen=True)

    variant: E

    @property
    def is_known(self) -> Literal[True]:
        return True

    def get(self, default: Any = None) -> E:
        """Return the matched member."""
        return self.variant


class Unknown(BaseModel):
    """A raw code that no member of the enum recognises.

    The raw code is kept so callers can log or display it.
    """

    model_config = ConfigDict(frozen=True)

    raw: str

    @property
    def is_known(self) -> Literal[False]:
        return False

    def get(self, default: Any = None) -> Any:
        """Return ``default``; there is no member to return."""
        return default


class CodedEnum(Enum):
    """Enum whose members are declared as ``(code, label)`` tuples.

    ``code`` is the exact string sent by the API, ``label`` a human-readable
    description.
    """

    code: str
    label: str

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    def __str__(self) -> str:
        return self.label

    @classmethod
    def try_from_name(cls, raw: Any) -> Known[Any] | Unknown:
        """Look up a member by its API code.

        Matching is exact and case-sensitive. Unrecognised codes are not an
        error: they yield ``Unknown`` so new upstream codes do not break
        parsing.

        Args:
            raw: Code as found in the JSON payload

        Returns:
            ``Known`` wrapping the member, or ``Unknown`` holding the raw code
        """
        for member in cls:
            if member.code == raw:
                return Known[cls](variant=member)  # type: ignore[valid-type]
        logger.debug("Unrecognised %s code %r", cls.__name__, raw)
        return Unknown(raw=str(raw))
