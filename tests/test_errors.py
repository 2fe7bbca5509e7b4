import pytest

from weatherkit.errors import (
    InvalidField,
    InvalidTimestamp,
    InvalidTimezone,
    MissingField,
    OutOfRange,
    UnsupportedConversion,
    WeatherKitError,
)
from weatherkit.units import SpeedUnit, TemperatureUnit


def test_base_error_message_and_original() -> None:
    err = WeatherKitError("boom")
    assert str(err) == "boom"
    assert err.message == "boom"
    assert err.original_error is None


@pytest.mark.parametrize(
    "err",
    [
        MissingField("humidity"),
        InvalidField("bad"),
        InvalidTimestamp("nope"),
        InvalidTimezone("Mars/Olympus"),
        OutOfRange(12, 0, 11),
        UnsupportedConversion(TemperatureUnit.CELSIUS, SpeedUnit.KNOT),
    ],
)
def test_all_errors_share_base(err: WeatherKitError) -> None:
    assert isinstance(err, WeatherKitError)
    assert err.message == str(err)


def test_missing_field_names_field_and_snapshot() -> None:
    err = MissingField("humidity", "forecastHourly")
    assert err.field == "humidity"
    assert err.snapshot == "forecastHourly"
    assert str(err) == "Missing required field 'humidity' in forecastHourly"
    assert str(MissingField("humidity")) == "Missing required field 'humidity'"


def test_invalid_timestamp_wraps_exception() -> None:
    try:
        raise ValueError("bad parse")
    except ValueError as e:
        err = InvalidTimestamp("yesterday", e)
        assert err.raw == "yesterday"
        assert "'yesterday'" in str(err)
        assert isinstance(err.original_error, ValueError)


def test_invalid_timezone_keeps_name() -> None:
    err = InvalidTimezone("Mars/Olympus")
    assert err.name == "Mars/Olympus"
    assert "Mars/Olympus" in str(err)


def test_out_of_range_bounds() -> None:
    err = OutOfRange(12, 0, 11)
    assert (err.value, err.lower, err.upper) == (12, 0, 11)
    assert str(err) == "Value 12 is outside the range 0-11"


def test_unsupported_conversion_names_units() -> None:
    err = UnsupportedConversion(TemperatureUnit.CELSIUS, SpeedUnit.KNOT)
    assert err.source is TemperatureUnit.CELSIUS
    assert err.target is SpeedUnit.KNOT
    assert str(err) == "Cannot convert TemperatureUnit.CELSIUS to SpeedUnit.KNOT"
