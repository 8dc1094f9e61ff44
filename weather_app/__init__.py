"""
weather_app package – a tiny CLI tool that shows current weather for a city
and keeps up to three favourite cities on disk.

Public entry points
-------------------
* `weather_app.main` – the interactive driver (`python -m weather_app.main`)
* Service classes:
    - `OpenWeatherService`
    - `FavouritesStore`
* Utility helpers:
    - `format_weather`
* Colour constants via `weather_app.ColouredText`

    >>> from weather_app import OpenWeatherService, FavouritesStore
"""

__all__ = [
    "VERSION",
    "ColouredText",
    # Services
    "OpenWeatherService",
    "FavouritesStore",
    # Errors
    "WeatherServiceError",
    "CityNotFoundError",
    "FavouritesError",
    # Utilities
    "format_weather",
]

VERSION = "0.1.0"


# ----------------------------------------------------------------------
# Re‑export colour constants (they live in `weather_app.config`)
# ----------------------------------------------------------------------
from .config import Colours as ColouredText  # noqa: F401, E402


# ----------------------------------------------------------------------
# Re‑export the service classes (they are defined in sub‑packages)
# ----------------------------------------------------------------------
from .services import (  # noqa: F401, E402
    OpenWeatherService,
    FavouritesStore,
    WeatherServiceError,
    CityNotFoundError,
    FavouritesError,
)

from .utils import format_weather  # noqa: F401, E402
