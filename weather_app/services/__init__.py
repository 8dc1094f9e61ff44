"""
services package – the OpenWeather client and the favourites file.

    from weather_app.services import OpenWeatherService, FavouritesStore
"""

from .openweather import (  # noqa: F401
    OpenWeatherService,
    WeatherServiceError,
    CityNotFoundError,
)
from .favourites import FavouritesStore, FavouritesError  # noqa: F401

__all__ = [
    "OpenWeatherService",
    "WeatherServiceError",
    "CityNotFoundError",
    "FavouritesStore",
    "FavouritesError",
]
