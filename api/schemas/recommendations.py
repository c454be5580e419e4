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

"""
Схемы для эндпоинта /recommendations.

Запрос описывает собаку и погоду, ответ повторяет JSON-формат,
который возвращает модель-советчик.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from models.dog_enums import DogGender, WalkIntensity


class WeatherSnapshot(BaseModel):
    """Погода, на которую опирается рекомендация."""
    temperature: float
    condition: str
    humidity: Optional[float] = None
    wind_speed: float = 0


class WalkRecommendationRequest(BaseModel):
    """
    Запрос на рекомендацию прогулки.

    Содержит породу, возраст, вес и пол собаки, текущую погоду
    и необязательное название места.
    """
    dog_breed: str = Field(..., min_length=1)
    dog_age: int = Field(..., ge=0)
    dog_weight: Optional[float] = Field(default=None, gt=0)
    dog_gender: DogGender
    weather: WeatherSnapshot
    location: Optional[str] = None


class RecommendedDog(BaseModel):
    breed: str
    age: float
    gender: DogGender


class RecommendedWeather(BaseModel):
    temperature_c: float
    condition: str


class RecommendationPlan(BaseModel):
    distance_km: float = Field(..., ge=0)
    duration_min: float = Field(..., ge=0)
    intensity: WalkIntensity


class WalkRecommendationResponse(BaseModel):
    """Рекомендация прогулки (от модели или дефолтная)."""
    status: Literal["success", "error"]
    dog: RecommendedDog
    weather: RecommendedWeather
    recommendation: RecommendationPlan
    message: str = ""
    is_default: bool = False
