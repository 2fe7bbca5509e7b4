"""Shared machinery for building forecast snapshots from JSON."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, tzinfo
from typing import Any, ClassVar, Self, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from weatherkit.common.lookup import CodedEnum, Known, Unknown
from weatherkit.enums import UVIndex
from weatherkit.errors import InvalidField, MissingField
from weatherkit.measurements import Measurement, PercentageMeasurement
from weatherkit.utils.time import TimeUtils

M = TypeVar("M", bound=Measurement)
P = TypeVar("P", bound=PercentageMeasurement)


class FieldReader:
    """Reads typed values out of one JSON object.

    Required fields that are absent (or ``null``) raise ``MissingField``;
    optional ones come back as ``None``.
    """

    def __init__(self, data: Mapping[str, Any], timezone: tzinfo, snapshot: str) -> None:
        if not isinstance(data, Mapping):
            raise InvalidField(f"{snapshot} data must be a JSON object, got {type(data).__name__}")
        self.data = data
        self.timezone = timezone
        self.snapshot = snapshot

    def require(self, key: str) -> Any:
        value = self.data.get(key)
        if value is None:
            raise MissingField(key, self.snapshot)
        return value

    def optional(self, key: str) -> Any:
        return self.data.get(key)

    def timestamp(self, key: str) -> datetime:
        """Required ISO-8601 field, localised into the reader's timezone."""
        return TimeUtils.parse_iso8601(self.require(key), self.timezone)

    def optional_timestamp(self, key: str) -> datetime | None:
        raw = self.optional(key)
        return None if raw is None else TimeUtils.parse_iso8601(raw, self.timezone)

    def measurement(self, cls: type[M], key: str) -> M:
        return cls(self._number(key, self.require(key)))

    def optional_measurement(self, cls: type[M], key: str) -> M | None:
        raw = self.optional(key)
        return None if raw is None else cls(self._number(key, raw))

    def percentage(self, cls: type[P], key: str) -> P:
        """Required 0-1 fraction, stored on the 0-100 scale."""
        return cls.from_fraction(self._number(key, self.require(key)))

    def lookup(self, enum: type[CodedEnum], key: str) -> Known[Any] | Unknown:
        return enum.try_from_name(self.require(key))

    def optional_lookup(self, enum: type[CodedEnum], key: str) -> Known[Any] | Unknown | None:
        raw = self.optional(key)
        return None if raw is None else enum.try_from_name(raw)

    def uv_index(self, key: str) -> tuple[int, UVIndex]:
        """Required UV index as ``(value, exposure category)``."""
        raw = self._number(key, self.require(key))
        if isinstance(raw, float):
            if not raw.is_integer():
                raise InvalidField(f"Field '{key}' in {self.snapshot} must be an integer, got {raw!r}")
            raw = int(raw)
        return raw, UVIndex.from_ordinal(raw)

    def number(self, key: str) -> int | float:
        """Required numeric field."""
        return self._number(key, self.require(key))

    def _number(self, key: str, raw: Any) -> int | float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise InvalidField(f"Field '{key}' in {self.snapshot} must be a number, got {raw!r}")
        return raw


class Snapshot(BaseModel):
    """Immutable, timestamped bundle of measurements and categorical values.

    Subclasses implement ``_parse`` which reads every field in one pass and
    returns the constructor arguments. Construction either succeeds fully or
    raises; there are no setters.
    """

    model_config = ConfigDict(frozen=True)

    # Name of the dataset in the API payload, used in log and error messages
    SOURCE: ClassVar[str] = "snapshot"

    @classmethod
    def from_json(cls, data: Mapping[str, Any], timezone: str | tzinfo) -> Self:
        """Build a snapshot from a decoded JSON object.

        Args:
            data: JSON object for one forecast period
            timezone: IANA zone name or tzinfo used to localise timestamps

        Returns:
            The validated snapshot

        Raises:
            MissingField: If a required field is absent
            InvalidTimestamp: If a timestamp is not valid ISO-8601
            InvalidTimezone: If ``timezone`` is an unknown zone name
            OutOfRange: If a UV index falls outside 0-11
            InvalidField: If a present field has the wrong type or range
        """
        tz = TimeUtils.resolve_timezone(timezone)
        return cls._from_reader(FieldReader(data, tz, cls.SOURCE))

    @classmethod
    def _from_reader(cls, reader: FieldReader) -> Self:
        try:
            return cls(**cls._parse(reader))
        except ValidationError as err:
            raise InvalidField(f"Invalid {reader.snapshot} data:\n{err}", err) from err

    @classmethod
    def _parse(cls, reader: FieldReader) -> dict[str, Any]:
        raise NotImplementedError
