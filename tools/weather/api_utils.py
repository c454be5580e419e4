# The Walking Dog - Walk Companion Backend
# Copyright (C) 2025-2026 Olga Kalinina

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.

import asyncio
from typing import Optional, Tuple

import aiohttp

from infrastructure.logging.logger import setup_logger
from settings import settings

logger = setup_logger("weather_api")

REQUEST_TIMEOUT_SECONDS = 8
MAX_RETRIES = 3
RETRY_STATUSES = {408, 413, 429, 500, 502, 503, 504}
RETRY_DELAY_SECONDS = 0.5

# Описания погоды по кодам WMO
WEATHER_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


class WeatherUnavailable(Exception):
    """Open-Meteo не ответил или ответил ошибкой."""

    def __init__(self, message: str = "Failed to fetch weather data", status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(self.message)


async def _request_json(session: aiohttp.ClientSession, url: str, params: dict) -> Tuple[int, Optional[dict]]:
    async with session.get(url, params=params) as response:
        if response.status != 200:
            return response.status, None
        return response.status, await response.json()


async def get_weather_data(latitude: float, longitude: float) -> dict:
    """
    Получает текущую погоду по API Open-Meteo.

    Повторяет запрос при временных ошибках (RETRY_STATUSES, таймаут, обрыв сети).

    Returns:
        Dict с temperature, condition, wind_speed, wind_direction, is_day

    Raises:
        WeatherUnavailable: если погоду получить не удалось
    """
    url = f"{settings.OPEN_METEO_BASE_URL}/forecast"
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current_weather": "true",
    }
    timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)

    last_status: Optional[int] = None
    async with aiohttp.ClientSession(timeout=timeout) as session:
        for attempt in range(MAX_RETRIES + 1):
            logger.info(f"Weather API request: {url} ({latitude}, {longitude}), попытка {attempt + 1}")
            try:
                status, data = await _request_json(session, url, params)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning(f"Ошибка сети при запросе к Open-Meteo: {e}")
                status, data = None, None
            else:
                if status == 200 and data is not None:
                    return parse_current_weather(data)
                logger.error(f"Open-Meteo response status: {status}")
                if status not in RETRY_STATUSES:
                    raise WeatherUnavailable(f"HTTP error! status: {status}", status=status)

            last_status = status
            if attempt < MAX_RETRIES:
                await asyncio.sleep(RETRY_DELAY_SECONDS * (2 ** attempt))

    raise WeatherUnavailable(status=last_status)


def parse_current_weather(data: dict) -> dict:
    """Переводит ответ Open-Meteo в наш формат погоды."""
    try:
        current = data["current_weather"]
        return {
            "temperature": round(current["temperature"]),
            "condition": WEATHER_DESCRIPTIONS.get(current.get("weathercode"), "Unknown"),
            "wind_speed": round(current["windspeed"]),
            "wind_direction": current.get("winddirection"),
            "is_day": current.get("is_day") == 1,
        }
    except (KeyError, TypeError) as e:
        raise WeatherUnavailable(f"Unexpected Open-Meteo payload: {e}")
