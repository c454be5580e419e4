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
Рекомендации прогулки.

POST принимает собаку и погоду целиком, GET собирает запрос
из профиля собаки и текущей погоды в точке пользователя.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies.runtime import get_db, get_recommendation_service, get_weather_service
from api.schemas.recommendations import (
    WalkRecommendationRequest,
    WalkRecommendationResponse,
    WeatherSnapshot,
)
from infrastructure.logging.logger import setup_logger
from models.dog_enums import DogGender
from tools.dogs import DogNotFound, DogService

logger = setup_logger("recommendations")

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.post("", response_model=WalkRecommendationResponse)
async def recommend_walk(
    payload: WalkRecommendationRequest,
    recommendation_service=Depends(get_recommendation_service),
):
    """Всегда отвечает рекомендацией: при сбое модели приходит дефолтная."""
    try:
        return await recommendation_service.generate_walk_recommendation(payload)
    except Exception as exc:
        logger.error(f"[recommendations] Ошибка при генерации рекомендации: {exc}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Ошибка при генерации рекомендации: {exc}")


@router.get("/dogs/{dog_id}", response_model=WalkRecommendationResponse)
async def recommend_walk_for_dog(
    dog_id: str,
    account_id: str,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    db=Depends(get_db),
    weather_service=Depends(get_weather_service),
    recommendation_service=Depends(get_recommendation_service),
):
    with db.get_session() as session:
        try:
            dog = DogService(session).get_dog(account_id, dog_id)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)
        breed, age, weight, gender = dog.breed, dog.age or 0, dog.weight, dog.gender

    weather = await weather_service.get_weather_or_mock(latitude, longitude)
    request = WalkRecommendationRequest(
        dog_breed=breed,
        dog_age=age,
        dog_weight=weight,
        dog_gender=DogGender.from_str(gender),
        weather=WeatherSnapshot(
            temperature=weather["temperature"],
            condition=weather["condition"],
            humidity=weather.get("humidity"),
            wind_speed=weather.get("wind_speed") or 0,
        ),
        location=weather.get("location"),
    )

    try:
        return await recommendation_service.generate_walk_recommendation(request)
    except Exception as exc:
        logger.error(f"[recommendations] Ошибка при рекомендации для собаки {dog_id}: {exc}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Ошибка при генерации рекомендации: {exc}")
