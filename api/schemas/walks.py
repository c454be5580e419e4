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
Схемы для эндпоинта /walks.

Записи журнала прогулок: дистанция в метрах, длительность в секундах,
маршрут как список пар [lon, lat].
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WalkCreate(BaseModel):
    """Ручное добавление записи о прогулке (например, импорт)."""
    dog_id: str
    date: date
    time: datetime
    distance: float = Field(..., ge=0)
    duration: int = Field(..., ge=0)
    path: List[List[float]] = []


class WalkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    dog_id: str
    date: date
    time: datetime
    distance: float
    duration: int
    created_at: datetime
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None


class WalkDetailResponse(WalkResponse):
    path: List[List[float]] = []
