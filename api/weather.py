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


from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies.runtime import get_weather_service
from api.schemas.weather import WeatherInfo
from infrastructure.logging.logger import setup_logger

logger = setup_logger("weather")

router = APIRouter(prefix="/api/weather", tags=["weather"])


@router.get("", response_model=WeatherInfo)
async def get_weather(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    location: Optional[str] = None,
    weather_service=Depends(get_weather_service),
):
    """
    Погода в точке с иконкой и советом для прогулки.

    Если Open-Meteo недоступен, отдаём статичные данные с is_mock=True.
    """
    try:
        weather = await weather_service.get_weather_or_mock(latitude, longitude, location)
        weather["icon"] = weather_service.get_weather_icon(weather.get("condition"))
        weather["advice"] = weather_service.get_walking_advice(weather)
        return WeatherInfo.model_validate(weather)
    except Exception as exc:
        logger.error(f"[weather] Ошибка при получении погоды ({latitude}, {longitude}): {exc}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Ошибка при получении погоды: {exc}")
