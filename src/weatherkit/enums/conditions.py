"""Weather condition codes."""

from __future__ import annotations

from weatherkit.common.lookup import CodedEnum


class WeatherCondition(CodedEnum):
    """Condition codes sent in ``conditionCode`` fields."""

    BLOWING_DUST = ("BlowingDust", "Blowing dust")
    CLEAR = ("Clear", "Clear")
    CLOUDY = ("Cloudy", "Cloudy")
    FOGGY = ("Foggy", "Fog")
    HAZE = ("Haze", "Haze")
    MOSTLY_CLEAR = ("MostlyClear", "Mostly clear")
    MOSTLY_CLOUDY = ("MostlyCloudy", "Mostly cloudy")
    PARTLY_CLOUDY = ("PartlyCloudy", "Partly cloudy")
    SMOKY = ("Smoky", "Smoke")
    BREEZY = ("Breezy", "Breezy")
    WINDY = ("Windy", "Windy")
    DRIZZLE = ("Drizzle", "Drizzle")
    HEAVY_RAIN = ("HeavyRain", "Heavy rain")
    ISOLATED_THUNDERSTORMS = ("IsolatedThunderstorms", "Isolated thunderstorms")
    RAIN = ("Rain", "Rain")
    SUN_SHOWERS = ("SunShowers", "Sun showers")
    SCATTERED_THUNDERSTORMS = ("ScatteredThunderstorms", "Scattered thunderstorms")
    STRONG_STORMS = ("StrongStorms", "Strong storms")
    THUNDERSTORMS = ("Thunderstorms", "Thunderstorms")
    FRIGID = ("Frigid", "Frigid")
    HAIL = ("Hail", "Hail")
    HOT = ("Hot", "Hot")
    FLURRIES = ("Flurries", "Flurries")
    SLEET = ("Sleet", "Sleet")
    SNOW = ("Snow", "Snow")
    SUN_FLURRIES = ("SunFlurries", "Sun flurries")
    WINTRY_MIX = ("WintryMix", "Wintry mix")
    BLIZZARD = ("Blizzard", "Blizzard")
    BLOWING_SNOW = ("BlowingSnow", "Blowing snow")
    FREEZING_DRIZZLE = ("FreezingDrizzle", "Freezing drizzle")
    FREEZING_RAIN = ("FreezingRain", "Freezing rain")
    HEAVY_SNOW = ("HeavySnow", "Heavy snow")
    HURRICANE = ("Hurricane", "Hurricane")
    TROPICAL_STORM = ("TropicalStorm", "Tropical storm")

    @property
    def is_clear(self) -> bool:
        """Check if this condition represents clear weather."""
        return self in (WeatherCondition.CLEAR, WeatherCondition.MOSTLY_CLEAR)

    @property
    def is_rain(self) -> bool:
        """Check if this condition represents liquid precipitation."""
        return self in _RAIN

    @property
    def is_snow(self) -> bool:
        """Check if this condition represents frozen precipitation."""
        return self in _SNOW


_RAIN = frozenset(
    {
        WeatherCondition.DRIZZLE,
        WeatherCondition.HEAVY_RAIN,
        WeatherCondition.RAIN,
        WeatherCondition.SUN_SHOWERS,
        WeatherCondition.FREEZING_DRIZZLE,
        WeatherCondition.FREEZING_RAIN,
    }
)

_SNOW = frozenset(
    {
        WeatherCondition.FLURRIES,
        WeatherCondition.SNOW,
        WeatherCondition.SUN_FLURRIES,
        WeatherCondition.BLIZZARD,
        WeatherCondition.BLOWING_SNOW,
        WeatherCondition.HEAVY_SNOW,
    }
)
