import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Tuple, Union

import requests

from ..config import OPENWEATHER_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    """OpenWeather could not answer the request."""


class CityNotFoundError(WeatherServiceError):
    """OpenWeather has no city by that name."""


class OpenWeatherService:
    """Wraps the OpenWeather current-weather endpoint (metric units)."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Single city
    # ------------------------------------------------------------------
    def fetch_weather(self, city: str) -> dict:
        """
        Returns a dictionary with:
        - city (name as spelled by OpenWeather)
        - temp in °C
        - description
        - humidity in %
        - wind speed in m/s
        """
        params = {"q": city, "units": "metric", "appid": self.api_key}
        logger.info("Fetching weather for %s", city)
        try:
            resp = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise WeatherServiceError(f"OpenWeather request failed: {exc}") from exc

        if resp.status_code == 404:
            raise CityNotFoundError(f'City "{city}" not found.')
        if not resp.ok:
            raise WeatherServiceError(f"OpenWeather error ({resp.status_code})")

        try:
            data = resp.json()
            return {
                "city": data["name"],
                "temp": data["main"]["temp"],
                "description": data["weather"][0]["description"],
                "humidity": data["main"]["humidity"],
                "wind": data["wind"]["speed"],
            }
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise WeatherServiceError(
                f"OpenWeather returned an unexpected response: {exc!r}"
            ) from exc

    # ------------------------------------------------------------------
    # Several cities at once
    # ------------------------------------------------------------------
    def fetch_many(
        self, cities: Iterable[str]
    ) -> List[Tuple[str, Union[dict, WeatherServiceError]]]:
        """
        Fetch all cities concurrently and wait for every one of them.

        Results keep the input order. A failed city carries its exception
        instead of a report.
        """
        cities = list(cities)
        if not cities:
            return []

        def _one(city):
            try:
                return city, self.fetch_weather(city)
            except WeatherServiceError as exc:
                logger.warning("Could not fetch %s: %s", city, exc)
                return city, exc

        with ThreadPoolExecutor(max_workers=len(cities)) as pool:
            return list(pool.map(_one, cities))
