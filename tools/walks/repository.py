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

"""Репозиторий для работы с журналом прогулок."""

import uuid
from datetime import date, datetime
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from infrastructure.database.repositories import BaseRepository
from infrastructure.logging.logger import setup_logger
from tools.walks.models import WalkEntry, WalkPathPoint

logger = setup_logger("walk_repository")


class WalkRepository(BaseRepository[WalkEntry]):
    """Репозиторий прогулок пользователя."""

    def __init__(self, session: Session):
        super().__init__(session, WalkEntry)

    def add_walk(
        self,
        account_id: str,
        dog_id: str,
        walk_date: date,
        walk_time: datetime,
        distance: float,
        duration: int,
        path: Optional[Sequence[Sequence[float]]] = None,
    ) -> WalkEntry:
        """
        Создаёт запись о прогулке вместе с точками маршрута.

        Args:
            account_id: ID пользователя
            dog_id: ID собаки
            walk_date: День прогулки
            walk_time: Время окончания прогулки
            distance: Расстояние в метрах
            duration: Длительность в секундах
            path: Маршрут, список пар [lon, lat]

        Returns:
            Сохранённая прогулка
        """
        walk = WalkEntry(
            id=uuid.uuid4().hex,
            account_id=account_id,
            dog_id=dog_id,
            date=walk_date,
            time=walk_time,
            distance=distance,
            duration=duration,
            created_at=datetime.utcnow(),
        )
        for seq, (lon, lat) in enumerate(path or []):
            walk.path_points.append(WalkPathPoint(seq=seq, lat=lat, lon=lon))

        self.session.add(walk)
        self.session.commit()
        self.session.refresh(walk)

        logger.info(
            f"Создана прогулка: id={walk.id}, dog_id={dog_id}, "
            f"distance={distance:.1f}m, duration={duration}s, points={len(walk.path_points)}"
        )
        return walk

    def list_walks(self, account_id: str) -> List[WalkEntry]:
        """Все прогулки аккаунта, новые первыми."""
        return (
            self.session.query(WalkEntry)
            .filter(WalkEntry.account_id == account_id)
            .order_by(WalkEntry.time.desc())
            .all()
        )

    def get_walks_by_dog_id(self, account_id: str, dog_id: str) -> List[WalkEntry]:
        return (
            self.session.query(WalkEntry)
            .filter(WalkEntry.account_id == account_id, WalkEntry.dog_id == dog_id)
            .order_by(WalkEntry.time.desc())
            .all()
        )

    def get_walks_between(
        self,
        account_id: str,
        start: date,
        end: date,
        dog_id: Optional[str] = None,
    ) -> List[WalkEntry]:
        """Прогулки с датой в диапазоне [start, end]."""
        query = self.session.query(WalkEntry).filter(
            WalkEntry.account_id == account_id,
            WalkEntry.date >= start,
            WalkEntry.date <= end,
        )
        if dog_id:
            query = query.filter(WalkEntry.dog_id == dog_id)
        return query.order_by(WalkEntry.time.asc()).all()

    def clear_all(self, account_id: str) -> int:
        walk_ids = [
            row.id
            for row in self.session.query(WalkEntry.id).filter(WalkEntry.account_id == account_id)
        ]
        if walk_ids:
            (
                self.session.query(WalkPathPoint)
                .filter(WalkPathPoint.walk_id.in_(walk_ids))
                .delete(synchronize_session=False)
            )
        deleted = self.delete_all(account_id)
        logger.info(f"Удалены все прогулки account_id={account_id}: {deleted}")
        return deleted
