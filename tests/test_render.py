from weatherkit.common import Known, Unknown
from weatherkit.display import ForecastTextRenderer, describe
from weatherkit.enums import WeatherCondition
from weatherkit.forecasts import Forecast
from weatherkit.measurements import Temperature, Wind
from weatherkit.settings import DisplaySettings


def test_describe() -> None:
    assert describe(WeatherCondition.try_from_name("Rain")) == "Rain"
    assert describe(Known[WeatherCondition](variant=WeatherCondition.HAZE)) == "Haze"
    assert describe(Unknown(raw="Plasma")) == "[Plasma]"


def test_measurement_uses_preferred_unit_and_decimals() -> None:
    metric = ForecastTextRenderer(DisplaySettings())
    imperial = ForecastTextRenderer(DisplaySettings(units="imperial"))
    raw = ForecastTextRenderer(DisplaySettings(decimals=None))

    assert metric.measurement(Temperature(21.46)) == "21.5 °C"
    assert imperial.measurement(Temperature(18)) == "64.4 °F"
    assert imperial.measurement(Wind(14.4)) == "8.9 mph"
    assert raw.measurement(Temperature(21.46)) == "21.46 °C"


def test_hour_lines(forecast: Forecast) -> None:
    renderer = ForecastTextRenderer(DisplaySettings())
    first = renderer.hour_line(forecast.hourly[0])
    unknown = renderer.hour_line(forecast.hourly[2])

    # Times follow the forecast's own timezone
    assert first.startswith("12:00  Mostly cloudy, 18 °C")
    assert "precip 5 %" in first
    assert "wind 14.4 km/h NNE (gusts 28.8 km/h)" in first
    assert unknown.startswith("14:00  [SomeFutureCode], 15 °C")
    assert unknown.endswith("wind 18 km/h")


def test_current_line(forecast: Forecast) -> None:
    line = ForecastTextRenderer(DisplaySettings()).current_line(forecast.current)

    assert line.startswith("Now (12:15): Partly cloudy, 18.4 °C (feels like 17.9 °C)")
    assert "wind 14.4 km/h SW (gusts 32.4 km/h)" in line
    assert line.endswith("UV 5 Moderate")


def test_day_line(forecast: Forecast) -> None:
    line = ForecastTextRenderer(DisplaySettings()).day_line(forecast.daily[0])

    assert line == (
        "Thu 01 Jun  Rain, 11 °C / 21.5 °C, precip 75 %, UV max 6 High, moon Waxing Gibbous"
    )


def test_render_respects_counts(forecast: Forecast) -> None:
    settings = DisplaySettings(hourly_count=2, daily_count=1)
    lines = ForecastTextRenderer(settings).render(forecast)

    assert lines[0].startswith("Now (")
    hourly_at = lines.index("Hourly")
    daily_at = lines.index("Daily")
    assert daily_at - hourly_at == 4  # two hours and a blank line
    assert len(lines) == daily_at + 2


def test_render_empty_forecast() -> None:
    assert ForecastTextRenderer().render(Forecast()) == []
