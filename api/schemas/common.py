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
Общие схемы, используемые в нескольких эндпоинтах.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GeoLocation(BaseModel):
    """
    GPS-точка устройства.

    Используется при старте прогулки, в потоке координат во время
    трекинга и в запросах погоды/рекомендаций.
    """
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    timestamp: Optional[datetime] = None
    accuracy: Optional[float] = Field(default=None, ge=0)


class StatusResponse(BaseModel):
    """Простой ответ об успешной операции."""
    status: str = "ok"
    deleted: Optional[int] = None
