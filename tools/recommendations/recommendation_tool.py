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
Рекомендации прогулки от LLM.

Модель отвечает строго JSON по схеме WALK_RECOMMENDATION_SCHEMA. Любой сбой
(сеть, пустой или обрезанный ответ, битый JSON, нет нужных полей) даёт
дефолтную рекомендацию по возрасту собаки. Ответы кешируются в памяти.
"""

import json
import time
from typing import Dict, Optional, Tuple

import yaml
from pydantic import ValidationError

from api.schemas.recommendations import (
    WalkRecommendationRequest,
    WalkRecommendationResponse,
)
from infrastructure.llm.client import LLMClient, LLMRequestError
from infrastructure.llm.helpers import strip_code_fences
from infrastructure.logging.logger import setup_logger
from models.dog_enums import WalkIntensity
from settings import settings

CACHE_TTL_SECONDS = 30 * 60
MIN_CONTENT_LENGTH = 10
REQUIRED_FIELDS = ("status", "dog", "recommendation")

DEFAULT_MESSAGE = "Default recommendation based on age and basic breed characteristics."

WALK_RECOMMENDATION_SCHEMA = {
    "type": "json_schema",
    "json_schema": {
        "name": "walk_recommendation",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": ["success", "error"],
                    "description": "Status of the recommendation",
                },
                "dog": {
                    "type": "object",
                    "properties": {
                        "breed": {"type": "string", "description": "Dog breed"},
                        "age": {"type": "number", "description": "Dog age in years"},
                        "gender": {
                            "type": "string",
                            "enum": ["male", "female"],
                            "description": "Dog gender",
                        },
                    },
                    "required": ["breed", "age", "gender"],
                    "additionalProperties": False,
                },
                "weather": {
                    "type": "object",
                    "properties": {
                        "temperature_c": {"type": "number", "description": "Temperature in Celsius"},
                        "condition": {"type": "string", "description": "Weather condition description"},
                    },
                    "required": ["temperature_c", "condition"],
                    "additionalProperties": False,
                },
                "recommendation": {
                    "type": "object",
                    "properties": {
                        "distance_km": {
                            "type": "number",
                            "description": "Recommended walking distance in kilometers",
                        },
                        "duration_min": {
                            "type": "number",
                            "description": "Recommended walking duration in minutes",
                        },
                        "intensity": {
                            "type": "string",
                            "enum": ["low", "medium", "high"],
                            "description": "Walking intensity level",
                        },
                    },
                    "required": ["distance_km", "duration_min", "intensity"],
                    "additionalProperties": False,
                },
                "message": {
                    "type": "string",
                    "description": "Brief explanation of why this distance and duration are recommended",
                },
            },
            "required": ["status", "dog", "weather", "recommendation", "message"],
            "additionalProperties": False,
        },
    },
}


class WalkRecommendationService:
    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        prompt_path: Optional[str] = None,
        cache_ttl: float = CACHE_TTL_SECONDS,
    ):
        self.logger = setup_logger("recommendation_tool")
        self.llm_client = llm_client or LLMClient(max_retries=1, timeout_seconds=30)
        self.prompt_path = prompt_path or settings.RECOMMENDATION_PROMPT_PATH
        self.prompts = self._load_prompt_template()
        self.cache_ttl = cache_ttl
        self._cache: Dict[str, Tuple[float, WalkRecommendationResponse]] = {}

    def _load_prompt_template(self) -> dict:
        try:
            with open(self.prompt_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except Exception as e:
            self.logger.error(f"Ошибка загрузки {self.prompt_path}: {e}")
            return {}

    async def generate_walk_recommendation(
        self,
        request: WalkRecommendationRequest,
    ) -> WalkRecommendationResponse:
        """Рекомендация из кеша, от модели или дефолтная."""
        key = request.model_dump_json()
        cached = self._cache.get(key)
        if cached and cached[0] > time.monotonic():
            self.logger.info("Рекомендация взята из кеша")
            return cached[1]

        result = await self._ask_model(request)
        self._cache[key] = (time.monotonic() + self.cache_ttl, result)
        self._evict_expired()
        return result

    def build_user_prompt(self, request: WalkRecommendationRequest) -> str:
        template = self.prompts.get("user_prompt", "")
        weather = request.weather
        location_line = f"- Location: {request.location}" if request.location else ""
        return template.format(
            breed=request.dog_breed,
            age=request.dog_age,
            weight=f"{request.dog_weight:g}kg" if request.dog_weight is not None else "unknown weight",
            gender=request.dog_gender.value,
            temperature=f"{weather.temperature:g}",
            condition=weather.condition,
            humidity=f"{weather.humidity:g}%" if weather.humidity is not None else "unknown",
            wind_speed=f"{weather.wind_speed:g}",
            location_line=location_line,
        ).strip()

    async def _ask_model(self, request: WalkRecommendationRequest) -> WalkRecommendationResponse:
        user_prompt = self.build_user_prompt(request)
        self.logger.info(f"userPrompt: {user_prompt}")

        try:
            response = await self.llm_client.get_response(
                system_prompt=self.prompts.get("system_prompt", ""),
                user_prompt=user_prompt,
                temperature=0.3,
                max_tokens=500,
                response_format=WALK_RECOMMENDATION_SCHEMA,
            )
        except LLMRequestError as e:
            self.logger.error(f"AI API error: {e}")
            return self.get_default_recommendation(request)

        if response.get("finish_reason") == "length":
            self.logger.warning("AI response was truncated due to max_tokens limit")

        return self.parse_content(response.get("content") or "", request)

    def parse_content(self, content: str, request: WalkRecommendationRequest) -> WalkRecommendationResponse:
        """Разбирает ответ модели; при любой проблеме возвращает дефолт."""
        clean = strip_code_fences(content)
        if len(clean) < MIN_CONTENT_LENGTH:
            self.logger.error(f"AI response content is empty or too short: {clean!r}")
            return self.get_default_recommendation(request)

        try:
            parsed = json.loads(clean)
        except json.JSONDecodeError as e:
            self.logger.error(f"Failed to parse AI response: {e}; raw content: {content}")
            return self.get_default_recommendation(request)

        if not isinstance(parsed, dict) or not all(parsed.get(field) for field in REQUIRED_FIELDS):
            self.logger.error(f"AI response missing required fields: {parsed}")
            return self.get_default_recommendation(request)

        parsed.setdefault(
            "weather",
            {"temperature_c": request.weather.temperature, "condition": request.weather.condition},
        )
        try:
            return WalkRecommendationResponse.model_validate(parsed)
        except ValidationError as e:
            self.logger.error(f"AI response has invalid structure: {e}")
            return self.get_default_recommendation(request)

    def get_default_recommendation(self, request: WalkRecommendationRequest) -> WalkRecommendationResponse:
        if request.dog_age > 7:
            distance_km, duration_min = 1.5, 20
        elif request.dog_age < 2:
            distance_km, duration_min = 1.0, 15
        else:
            distance_km, duration_min = 2.5, 30

        return WalkRecommendationResponse(
            status="success",
            dog={
                "breed": request.dog_breed,
                "age": request.dog_age,
                "gender": request.dog_gender,
            },
            weather={
                "temperature_c": request.weather.temperature,
                "condition": request.weather.condition,
            },
            recommendation={
                "distance_km": distance_km,
                "duration_min": duration_min,
                "intensity": WalkIntensity.MEDIUM,
            },
            message=self.prompts.get("default_message", DEFAULT_MESSAGE),
            is_default=True,
        )

    def _evict_expired(self) -> None:
        now = time.monotonic()
        for key in [k for k, (expires_at, _) in self._cache.items() if expires_at <= now]:
            del self._cache[key]
