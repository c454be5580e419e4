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
Трекер одной прогулки.

Сводит вместе три потока событий:
- GPS-точки от клиента (update_location);
- секундный таймер (tick);
- действия пользователя (start / pause / resume / finish).

Дистанция копится только между точками, которые дальше друг от друга,
чем MIN_STEP_METERS. Мелкий GPS-дрейф не засчитывается и якорь не сдвигает.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from models.dog_enums import WalkState
from tools.walks.exceptions import NoLocationFix, WalkSessionStateError
from tools.walks.formatting import format_distance, format_duration
from tools.walks.geo import haversine_distance

MIN_STEP_METERS = 2.0


@dataclass(frozen=True)
class LocationFix:
    """GPS-точка от устройства."""
    latitude: float
    longitude: float
    timestamp: Optional[datetime] = None
    accuracy: Optional[float] = None

    def as_path_point(self) -> List[float]:
        # порядок [lon, lat], как у карты на клиенте
        return [self.longitude, self.latitude]


@dataclass
class WalkSummary:
    """Итог завершённой прогулки, готовый к сохранению в журнал."""
    dog_id: str
    started_at: datetime
    finished_at: datetime
    distance: float
    duration: int
    path: List[List[float]] = field(default_factory=list)

    @property
    def date(self) -> str:
        return self.finished_at.date().isoformat()

    @property
    def time(self) -> str:
        return self.finished_at.isoformat()


class WalkTracker:
    """Состояние одной прогулки: дистанция, маршрут, время."""

    def __init__(self, dog_id: str, min_step_meters: float = MIN_STEP_METERS):
        self.dog_id = dog_id
        self.min_step_meters = min_step_meters

        self.state = WalkState.IDLE
        self.distance = 0.0
        self.duration = 0
        self.path: List[List[float]] = []
        self.started_at: Optional[datetime] = None
        self.finished_at: Optional[datetime] = None

        self.last_fix: Optional[LocationFix] = None
        self._anchor: Optional[LocationFix] = None

    @property
    def is_active(self) -> bool:
        return self.state in (WalkState.WALKING, WalkState.PAUSED)

    def update_location(self, fix: LocationFix) -> float:
        """
        Принимает новую GPS-точку.

        Returns:
            Сколько метров добавлено к дистанции (0, если точка не засчитана)
        """
        self.last_fix = fix

        if self.state != WalkState.WALKING or self._anchor is None:
            return 0.0

        step = haversine_distance(
            self._anchor.latitude,
            self._anchor.longitude,
            fix.latitude,
            fix.longitude,
        )
        if step <= self.min_step_meters:
            return 0.0

        self.distance += step
        self.path.append(fix.as_path_point())
        self._anchor = fix
        return step

    def start(self, fix: Optional[LocationFix] = None, now: Optional[datetime] = None) -> None:
        if self.is_active:
            raise WalkSessionStateError("start", self.state.value)
        if fix is not None:
            self.last_fix = fix
        if self.last_fix is None:
            raise NoLocationFix()

        self.state = WalkState.WALKING
        self.distance = 0.0
        self.duration = 0
        self.path = [self.last_fix.as_path_point()]
        self._anchor = self.last_fix
        self.started_at = now or datetime.now()
        self.finished_at = None

    def tick(self) -> None:
        if self.state == WalkState.WALKING:
            self.duration += 1

    def pause(self) -> None:
        if self.state != WalkState.WALKING:
            raise WalkSessionStateError("pause", self.state.value)
        self.state = WalkState.PAUSED

    def resume(self) -> None:
        if self.state != WalkState.PAUSED:
            raise WalkSessionStateError("resume", self.state.value)
        # путь, пройденный на паузе, не считаем
        self._anchor = self.last_fix
        self.state = WalkState.WALKING

    def finish(self, now: Optional[datetime] = None) -> WalkSummary:
        if not self.is_active:
            raise WalkSessionStateError("finish", self.state.value)

        self.state = WalkState.FINISHED
        self.finished_at = now or datetime.now()
        self._anchor = None

        return WalkSummary(
            dog_id=self.dog_id,
            started_at=self.started_at,
            finished_at=self.finished_at,
            distance=self.distance,
            duration=self.duration,
            path=list(self.path),
        )

    def snapshot(self) -> Dict[str, Any]:
        last = self.last_fix
        return {
            "dog_id": self.dog_id,
            "state": self.state.value,
            "distance": self.distance,
            "duration": self.duration,
            "distance_text": format_distance(self.distance),
            "duration_text": format_duration(self.duration),
            "path_points": len(self.path),
            "started_at": self.started_at,
            "last_location": (
                {"lat": last.latitude, "lon": last.longitude}
                if last is not None else None
            ),
        }
