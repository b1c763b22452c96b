"""
Forecast URL construction
"""

from typing import Optional
import logging

from src.coreutils.request import build_url
from .config import WeatherSettings, get_weather_settings
from .schemas import WeatherQuery

logger = logging.getLogger(__name__)


def build_weather_query(
    lat: float, lon: float, settings: Optional[WeatherSettings] = None
) -> WeatherQuery:
    """
    Create a validated query for one location

    Args:
        lat: Latitude
        lon: Longitude
        settings: Optional settings (defaults to the environment)

    Returns:
        WeatherQuery: Validated parameters
    """
    settings = settings or get_weather_settings()
    return WeatherQuery(
        lat=lat,
        lon=lon,
        appid=settings.api_key,
        units=settings.units,
        exclude=settings.exclude or None,
        lang=settings.lang or None,
    )


def build_forecast_url(
    lat: float, lon: float, settings: Optional[WeatherSettings] = None
) -> str:
    """
    Build the One Call request URL for one location

    Args:
        lat: Latitude
        lon: Longitude
        settings: Optional settings (defaults to the environment)

    Returns:
        str: Full request URL
    """
    settings = settings or get_weather_settings()
    query = build_weather_query(lat, lon, settings)
    url = build_url(settings.api_url, query.to_params())
    logger.debug(f"Built forecast URL for lat={lat}, lon={lon}")
    return url
