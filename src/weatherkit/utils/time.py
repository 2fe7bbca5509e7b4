# src/weatherkit/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weatherkit.errors import InvalidTimestamp, InvalidTimezone


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with dates and times:
    - Timezone resolution from IANA names
    - ISO-8601 parsing with localisation
    - Datetime formatting with user preferences
    """

    @staticmethod
    def resolve_timezone(timezone: str | tzinfo) -> tzinfo:
        """Resolve a timezone name to a tzinfo object.

        Args:
            timezone: IANA zone name or an existing tzinfo

        Returns:
            tzinfo object

        Raises:
            InvalidTimezone: If the name is not a known zone
        """
        if isinstance(timezone, tzinfo):
            return timezone
        try:
            return ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidTimezone(timezone, exc) from exc

    @staticmethod
    def parse_iso8601(raw: Any, timezone: tzinfo) -> datetime:
        """Parse an ISO-8601 timestamp and convert it into ``timezone``.

        Naive timestamps are taken to be UTC.

        Args:
            raw: Timestamp string such as ``"2023-06-01T10:00:00Z"``
            timezone: Zone to localise into

        Returns:
            Timezone-aware datetime in ``timezone``

        Raises:
            InvalidTimestamp: If ``raw`` is not a valid ISO-8601 string
        """
        if not isinstance(raw, str):
            raise InvalidTimestamp(raw)
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise InvalidTimestamp(raw, exc) from exc
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(timezone)

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string.

        Args:
            dt: Datetime to format
            format_string: strftime format string

        Returns:
            Formatted datetime string
        """
        return dt.strftime(format_string)
