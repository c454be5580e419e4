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

"""Схемы для эндпоинта /weather."""

from typing import Optional

from pydantic import BaseModel


class WalkingAdvice(BaseModel):
    text: str
    color: str


class WeatherInfo(BaseModel):
    """
    Текущая погода для экрана прогулки.

    is_mock=True значит, что API погоды был недоступен
    и вернулись статичные данные.
    """
    temperature: float
    condition: str
    humidity: Optional[float] = None
    wind_speed: float
    wind_direction: Optional[float] = None
    is_day: bool
    location: Optional[str] = None
    is_mock: bool = False
    icon: str
    advice: WalkingAdvice
