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
Схемы для эндпоинта /journal.

День, календарь месяца и сводка по прогулкам.
"""

from datetime import date
from typing import Dict, List

from pydantic import BaseModel

from api.schemas.walks import WalkResponse


class JournalDay(BaseModel):
    date: date
    walks: List[WalkResponse]


class CalendarDay(BaseModel):
    walks: int
    distance: float
    duration: int


class JournalCalendar(BaseModel):
    year: int
    month: int
    days: Dict[str, CalendarDay]


class JournalSummary(BaseModel):
    total_walks: int
    total_distance: float
    total_duration: int
    total_distance_text: str
    total_duration_text: str
    recent: List[WalkResponse]
