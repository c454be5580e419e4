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

from typing import Dict, Optional

from infrastructure.logging.logger import setup_logger
from tools.weather.api_utils import WeatherUnavailable, get_weather_data

DEFAULT_LOCATION_LABEL = "Current Location"

WEATHER_ICONS = {
    "sunny": "☀️",
    "clear": "☀️",
    "cloudy": "☁️",
    "clouds": "☁️",
    "rainy": "🌧️",
    "rain": "🌧️",
    "snowy": "❄️",
    "snow": "❄️",
    "thunderstorm": "⛈️",
    "drizzle": "🌦️",
    "mist": "🌫️",
    "fog": "🌫️",
}
DEFAULT_WEATHER_ICON = "🌤️"


class WeatherService:
    """Погода для планирования прогулки."""

    def __init__(self):
        self.logger = setup_logger("weather_tool")

    async def get_current_weather(self, latitude: float, longitude: float) -> dict:
        """Погода из Open-Meteo. Ошибки пробрасываются как WeatherUnavailable."""
        return await get_weather_data(latitude=latitude, longitude=longitude)

    async def get_weather_or_mock(
        self,
        latitude: float,
        longitude: float,
        location: Optional[str] = None,
    ) -> dict:
        """Погода с фолбэком на статичные данные, если API недоступен."""
        try:
            weather = await self.get_current_weather(latitude, longitude)
            weather["is_mock"] = False
        except WeatherUnavailable as e:
            self.logger.warning(f"Weather API failed, using mock data: {e}")
            weather = self.get_mock_weather()

        if location:
            weather["location"] = location
        else:
            weather.setdefault("location", DEFAULT_LOCATION_LABEL)
        return weather

    @staticmethod
    def get_mock_weather() -> dict:
        return {
            "temperature": 22,
            "condition": "Sunny",
            "humidity": 65,
            "wind_speed": 8,
            "wind_direction": None,
            "is_day": True,
            "location": DEFAULT_LOCATION_LABEL,
            "is_mock": True,
        }

    @staticmethod
    def get_weather_icon(condition: str) -> str:
        return WEATHER_ICONS.get((condition or "").strip().lower(), DEFAULT_WEATHER_ICON)

    @staticmethod
    def get_walking_advice(weather: dict) -> Dict[str, str]:
        """Короткий совет по прогулке по температуре."""
        temp = weather["temperature"]

        if temp > 30:
            return {"text": "Too hot! Walk early morning or evening", "color": "text-red-600"}
        elif temp > 25:
            return {"text": "Great weather for walking!", "color": "text-green-600"}
        elif temp > 15:
            return {"text": "Perfect walking conditions", "color": "text-green-500"}
        elif temp > 5:
            return {"text": "Cool weather - perfect for active dogs", "color": "text-blue-500"}
        elif temp > 0:
            return {"text": "Bundle up for a chilly walk", "color": "text-blue-600"}
        else:
            return {"text": "Very cold - keep walks short", "color": "text-blue-800"}
