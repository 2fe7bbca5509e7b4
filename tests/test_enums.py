import pytest

from weatherkit.common import Known, Unknown
from weatherkit.enums import (
    CompassPoint,
    MoonPhase,
    PrecipitationType,
    PressureTrend,
    UVIndex,
    WeatherCondition,
)
from weatherkit.errors import OutOfRange


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, UVIndex.LOW),
        (2, UVIndex.LOW),
        (3, UVIndex.MODERATE),
        (5, UVIndex.MODERATE),
        (6, UVIndex.HIGH),
        (7, UVIndex.HIGH),
        (8, UVIndex.VERY_HIGH),
        (10, UVIndex.VERY_HIGH),
        (11, UVIndex.EXTREME),
    ],
)
def test_uv_index_from_ordinal(n: int, expected: UVIndex) -> None:
    assert UVIndex.from_ordinal(n) is expected


@pytest.mark.parametrize("n", [-1, 12, 100])
def test_uv_index_out_of_range(n: int) -> None:
    with pytest.raises(OutOfRange) as exc_info:
        UVIndex.from_ordinal(n)
    assert exc_info.value.value == n
    assert (exc_info.value.lower, exc_info.value.upper) == (0, 11)


def test_uv_index_labels() -> None:
    assert str(UVIndex.VERY_HIGH) == "Very High"
    assert [m.label for m in UVIndex] == ["Low", "Moderate", "High", "Very High", "Extreme"]


def test_condition_lookup_known() -> None:
    result = WeatherCondition.try_from_name("MostlyCloudy")

    assert isinstance(result, Known)
    assert result.is_known is True
    assert result.variant is WeatherCondition.MOSTLY_CLOUDY
    assert result.get() is WeatherCondition.MOSTLY_CLOUDY
    assert str(result.variant) == "Mostly cloudy"


@pytest.mark.parametrize("raw", ["SomeFutureCode", "mostlycloudy", "", 42])
def test_condition_lookup_unknown_keeps_raw(raw) -> None:
    result = WeatherCondition.try_from_name(raw)

    assert isinstance(result, Unknown)
    assert result.is_known is False
    assert result.raw == str(raw)
    assert result.get() is None
    assert result.get("fallback") == "fallback"


def test_every_condition_code_round_trips() -> None:
    for member in WeatherCondition:
        assert WeatherCondition.try_from_name(member.code).get() is member


@pytest.mark.parametrize(
    "condition, clear, rain, snow",
    [
        (WeatherCondition.CLEAR, True, False, False),
        (WeatherCondition.MOSTLY_CLEAR, True, False, False),
        (WeatherCondition.RAIN, False, True, False),
        (WeatherCondition.DRIZZLE, False, True, False),
        (WeatherCondition.HEAVY_SNOW, False, False, True),
        (WeatherCondition.CLOUDY, False, False, False),
    ],
)
def test_condition_groups(condition: WeatherCondition, clear: bool, rain: bool, snow: bool) -> None:
    assert condition.is_clear is clear
    assert condition.is_rain is rain
    assert condition.is_snow is snow


@pytest.mark.parametrize(
    "enum, raw, member",
    [
        (PrecipitationType, "clear", PrecipitationType.CLEAR),
        (PrecipitationType, "mixed", PrecipitationType.MIXED),
        (PressureTrend, "falling", PressureTrend.FALLING),
        (MoonPhase, "waxingGibbous", MoonPhase.WAXING_GIBBOUS),
        (MoonPhase, "thirdQuarter", MoonPhase.THIRD_QUARTER),
    ],
)
def test_category_lookup(enum, raw: str, member) -> None:
    assert enum.try_from_name(raw).get() is member


def test_category_lookup_is_case_sensitive() -> None:
    assert isinstance(PressureTrend.try_from_name("Rising"), Unknown)


def test_compass_points() -> None:
    assert len(CompassPoint) == 16
    assert CompassPoint.from_bearing(22.5) is CompassPoint.NNE
    assert CompassPoint.from_bearing(-90) is CompassPoint.W
    assert str(CompassPoint.SSW) == "SSW"
    assert CompassPoint.SSW.full_name == "South-southwest"
