"""
OpenWeather settings loaded from the environment
"""

from dataclasses import dataclass
from functools import lru_cache

from src.coreutils.env import env_get, env_require

DEFAULT_API_URL = "https://api.openweathermap.org/data/2.5/onecall"
DEFAULT_UNITS = "metric"
DEFAULT_LANG = "en"
DEFAULT_EXCLUDE = "current,minutely,hourly,alerts"


@dataclass(frozen=True)
class WeatherSettings:
    """OpenWeather configuration bundled in a single object"""

    api_key: str
    api_url: str = DEFAULT_API_URL
    units: str = DEFAULT_UNITS
    lang: str = DEFAULT_LANG
    exclude: str = DEFAULT_EXCLUDE


@lru_cache(maxsize=1)
def get_weather_settings() -> WeatherSettings:
    """
    Load and cache OpenWeather settings from environment variables

    Raises:
        ValueError: If OPENWEATHER_API_KEY is not set
    """
    return WeatherSettings(
        api_key=env_require("OPENWEATHER_API_KEY"),
        api_url=env_get("OPENWEATHER_API_URL", DEFAULT_API_URL),
        units=env_get("OPENWEATHER_UNITS", DEFAULT_UNITS),
        lang=env_get("OPENWEATHER_LANG", DEFAULT_LANG),
        exclude=env_get("OPENWEATHER_EXCLUDE", DEFAULT_EXCLUDE),
    )
