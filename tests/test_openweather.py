from unittest import mock

import pytest
import requests

from weather_app.services.openweather import (
    CityNotFoundError,
    OpenWeatherService,
    WeatherServiceError,
)

PAYLOAD = {
    "name": "London",
    "main": {"temp": 12.3, "humidity": 81},
    "weather": [{"description": "light rain"}],
    "wind": {"speed": 4.1},
}


def make_response(status, payload=None):
    resp = mock.Mock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.json.return_value = payload
    return resp


@pytest.fixture
def http_get():
    with mock.patch("weather_app.services.openweather.requests.get") as get:
        yield get


@pytest.fixture
def service(http_get):
    return OpenWeatherService("KEY", base_url="https://example.test/weather", timeout=5)


def test_fetch_weather_maps_payload(service, http_get):
    http_get.return_value = make_response(200, PAYLOAD)
    report = service.fetch_weather("london")
    assert report == {
        "city": "London",
        "temp": 12.3,
        "description": "light rain",
        "humidity": 81,
        "wind": 4.1,
    }
    http_get.assert_called_once_with(
        "https://example.test/weather",
        params={"q": "london", "units": "metric", "appid": "KEY"},
        timeout=5,
    )


def test_fetch_weather_not_found(service, http_get):
    http_get.return_value = make_response(404)
    with pytest.raises(CityNotFoundError, match='City "Atlantis" not found.'):
        service.fetch_weather("Atlantis")


def test_fetch_weather_other_status(service, http_get):
    http_get.return_value = make_response(401)
    with pytest.raises(WeatherServiceError, match=r"OpenWeather error \(401\)"):
        service.fetch_weather("London")


def test_fetch_weather_network_error(service, http_get):
    http_get.side_effect = requests.ConnectionError("boom")
    with pytest.raises(WeatherServiceError, match="request failed"):
        service.fetch_weather("London")


def test_fetch_many_keeps_order_and_isolates_failures(service, http_get):
    def fake_get(url, params, timeout):
        if params["q"] == "Nowhere":
            return make_response(404)
        return make_response(200, dict(PAYLOAD, name=params["q"]))

    http_get.side_effect = fake_get
    results = service.fetch_many(["Paris", "Nowhere", "Rome"])

    assert [city for city, _ in results] == ["Paris", "Nowhere", "Rome"]
    assert results[0][1]["city"] == "Paris"
    assert isinstance(results[1][1], CityNotFoundError)
    assert results[2][1]["city"] == "Rome"


def test_fetch_many_empty(service, http_get):
    assert service.fetch_many([]) == []
    http_get.assert_not_called()


def test_fetch_weather_body_not_json(service, http_get):
    resp = make_response(200)
    resp.json.side_effect = ValueError("not json")
    http_get.return_value = resp
    with pytest.raises(WeatherServiceError, match="unexpected response"):
        service.fetch_weather("London")


@pytest.mark.parametrize(
    "payload",
    [
        {"cod": 200},
        dict(PAYLOAD, weather=[]),
        dict(PAYLOAD, main=None),
        ["London"],
    ],
)
def test_fetch_weather_payload_missing_fields(service, http_get, payload):
    http_get.return_value = make_response(200, payload)
    with pytest.raises(WeatherServiceError, match="unexpected response"):
        service.fetch_weather("London")


def test_fetch_many_reports_malformed_city(service, http_get):
    def fake_get(url, params, timeout):
        if params["q"] == "Oslo":
            return make_response(200, {"cod": 200})
        return make_response(200, dict(PAYLOAD, name=params["q"]))

    http_get.side_effect = fake_get
    results = dict(service.fetch_many(["Oslo", "Rome"]))
    assert isinstance(results["Oslo"], WeatherServiceError)
    assert results["Rome"]["city"] == "Rome"
