import pytest

from tools.weather import api_utils
from tools.weather.api_utils import WeatherUnavailable, get_weather_data, parse_current_weather
from tools.weather.weather_tool import WeatherService

OPEN_METEO_PAYLOAD = {
    "current_weather": {
        "temperature": 21.6,
        "windspeed": 7.4,
        "winddirection": 180,
        "weathercode": 3,
        "is_day": 1,
    }
}


def test_parse_current_weather():
    weather = parse_current_weather(OPEN_METEO_PAYLOAD)

    assert weather == {
        "temperature": 22,
        "condition": "Overcast",
        "wind_speed": 7,
        "wind_direction": 180,
        "is_day": True,
    }


def test_parse_unknown_weather_code():
    payload = {"current_weather": {"temperature": 1.2, "windspeed": 0, "weathercode": 42, "is_day": 0}}
    weather = parse_current_weather(payload)

    assert weather["condition"] == "Unknown"
    assert weather["is_day"] is False


def test_parse_broken_payload():
    with pytest.raises(WeatherUnavailable):
        parse_current_weather({"hourly": {}})


def _fake_responses(monkeypatch, responses):
    calls = []

    async def fake_request_json(session, url, params):
        calls.append(params)
        return responses[min(len(calls), len(responses)) - 1]

    monkeypatch.setattr(api_utils, "_request_json", fake_request_json)
    monkeypatch.setattr(api_utils, "RETRY_DELAY_SECONDS", 0)
    return calls


@pytest.mark.asyncio
async def test_get_weather_retries_transient_errors(monkeypatch):
    calls = _fake_responses(monkeypatch, [(503, None), (429, None), (200, OPEN_METEO_PAYLOAD)])

    weather = await get_weather_data(55.75, 37.61)

    assert len(calls) == 3
    assert calls[0]["latitude"] == 55.75
    assert weather["temperature"] == 22


@pytest.mark.asyncio
async def test_get_weather_gives_up_after_retries(monkeypatch):
    calls = _fake_responses(monkeypatch, [(503, None)])

    with pytest.raises(WeatherUnavailable) as err:
        await get_weather_data(55.75, 37.61)

    assert len(calls) == api_utils.MAX_RETRIES + 1
    assert err.value.status == 503


@pytest.mark.asyncio
async def test_get_weather_does_not_retry_client_errors(monkeypatch):
    calls = _fake_responses(monkeypatch, [(400, None)])

    with pytest.raises(WeatherUnavailable):
        await get_weather_data(55.75, 37.61)

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_weather_service_falls_back_to_mock(monkeypatch):
    _fake_responses(monkeypatch, [(404, None)])

    weather = await WeatherService().get_weather_or_mock(55.75, 37.61)

    assert weather["is_mock"] is True
    assert weather["temperature"] == 22
    assert weather["condition"] == "Sunny"
    assert weather["location"] == "Current Location"


@pytest.mark.asyncio
async def test_weather_service_keeps_location_label(monkeypatch):
    _fake_responses(monkeypatch, [(200, OPEN_METEO_PAYLOAD)])

    weather = await WeatherService().get_weather_or_mock(55.75, 37.61, location="Gorky Park")

    assert weather["is_mock"] is False
    assert weather["location"] == "Gorky Park"


@pytest.mark.parametrize(
    "condition, icon",
    [("Sunny", "☀️"), ("rain", "🌧️"), (" Snow ", "❄️"), ("Overcast", "🌤️"), (None, "🌤️")],
)
def test_weather_icon(condition, icon):
    assert WeatherService.get_weather_icon(condition) == icon


@pytest.mark.parametrize(
    "temperature, text",
    [
        (31, "Too hot! Walk early morning or evening"),
        (30, "Great weather for walking!"),
        (20, "Perfect walking conditions"),
        (10, "Cool weather - perfect for active dogs"),
        (3, "Bundle up for a chilly walk"),
        (0, "Very cold - keep walks short"),
    ],
)
def test_walking_advice(temperature, text):
    assert WeatherService.get_walking_advice({"temperature": temperature})["text"] == text
