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
Схемы для эндпоинта /walk_sessions.

Живая прогулка: старт с GPS-точки и рекомендацией, поток координат,
пауза, завершение с сохранением в журнал.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from api.schemas.common import GeoLocation
from api.schemas.walks import WalkResponse
from models.dog_enums import WalkIntensity, WalkState


class WalkSuggestion(BaseModel):
    """Рекомендация, с которой пользователь пришёл на карту."""
    distance_km: Optional[float] = None
    duration_min: Optional[int] = None
    intensity: Optional[WalkIntensity] = None
    message: Optional[str] = None


class WalkSessionStart(BaseModel):
    dog_id: str
    location: Optional[GeoLocation] = None
    suggestion: Optional[WalkSuggestion] = None


class WalkLocationUpdate(BaseModel):
    """Одна или несколько GPS-точек по порядку."""
    points: List[GeoLocation]


class WalkSessionState(BaseModel):
    session_id: str
    dog_id: str
    state: WalkState
    distance: float
    duration: int
    distance_text: str
    duration_text: str
    path_points: int
    started_at: Optional[datetime] = None
    last_location: Optional[GeoLocation] = None
    suggestion: Optional[WalkSuggestion] = None


class WalkSessionFinished(BaseModel):
    """Итог прогулки и сохранённая запись журнала."""
    session: WalkSessionState
    walk: WalkResponse
