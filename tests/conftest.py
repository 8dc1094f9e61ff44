"""Shared fixtures for the weather tests."""
import pytest

from weather_app.services import (
    CityNotFoundError,
    FavouritesStore,
    WeatherServiceError,
)


def make_report(city, temp=20.0):
    return {
        "city": city,
        "temp": temp,
        "description": "clear sky",
        "humidity": 50,
        "wind": 3.5,
    }


class FakeWeatherService:
    """Stands in for OpenWeatherService; knows a fixed set of cities."""

    def __init__(self, known=("London", "Paris", "Tokyo", "Oslo", "Rome"), broken=()):
        self.known = set(known)
        self.broken = set(broken)
        self.calls = []

    def fetch_weather(self, city):
        self.calls.append(city)
        if city in self.broken:
            raise WeatherServiceError("OpenWeather error (500)")
        if city not in self.known:
            raise CityNotFoundError(f'City "{city}" not found.')
        return make_report(city)

    def fetch_many(self, cities):
        results = []
        for city in cities:
            try:
                results.append((city, self.fetch_weather(city)))
            except WeatherServiceError as exc:
                results.append((city, exc))
        return results


@pytest.fixture
def fake_service():
    return FakeWeatherService()


@pytest.fixture
def fav_path(tmp_path):
    return tmp_path / "favourites.json"


@pytest.fixture
def store(fav_path):
    return FavouritesStore(fav_path).load()
