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

"""Сервис журнала прогулок: запись, чтение, удаление."""

from datetime import date, datetime
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from infrastructure.logging.logger import setup_logger
from tools.dogs.exceptions import DogNotFound
from tools.dogs.repository import DogRepository
from tools.walks.exceptions import WalkNotFound, WalkValidationError
from tools.walks.models import WalkEntry
from tools.walks.repository import WalkRepository
from tools.walks.tracker import WalkSummary

logger = setup_logger("walk_service")


class WalkService:
    """Сервис для управления записями о прогулках."""

    def __init__(self, session: Session):
        self.session = session
        self.repo = WalkRepository(session)
        self.dog_repo = DogRepository(session)

    def add_walk(
        self,
        account_id: str,
        dog_id: str,
        walk_date: date,
        walk_time: datetime,
        distance: float,
        duration: int,
        path: Optional[Sequence[Sequence[float]]] = None,
        require_dog: bool = True,
    ) -> WalkEntry:
        """
        Сохраняет завершённую прогулку. После записи она не меняется.

        Raises:
            WalkValidationError: отрицательные дистанция или длительность
            DogNotFound: собака с таким ID не зарегистрирована
        """
        if distance is None or distance < 0:
            raise WalkValidationError("Distance must be non-negative")
        if duration is None or duration < 0:
            raise WalkValidationError("Duration must be non-negative")
        for point in path or []:
            if len(point) != 2:
                raise WalkValidationError("Path points must be [lon, lat] pairs")

        if require_dog and not self.dog_repo.exists(account_id=account_id, id=dog_id):
            raise DogNotFound(dog_id)

        return self.repo.add_walk(
            account_id=account_id,
            dog_id=dog_id,
            walk_date=walk_date,
            walk_time=walk_time,
            distance=float(distance),
            duration=int(duration),
            path=path,
        )

    def save_summary(self, account_id: str, summary: WalkSummary) -> WalkEntry:
        """Записывает итог трекинга как одну запись журнала."""
        return self.add_walk(
            account_id=account_id,
            dog_id=summary.dog_id,
            walk_date=summary.finished_at.date(),
            walk_time=summary.finished_at,
            distance=summary.distance,
            duration=summary.duration,
            path=summary.path,
            # собаку проверили на старте, за время прогулки её могли удалить
            require_dog=False,
        )

    def list_walks(self, account_id: str) -> List[WalkEntry]:
        return self.repo.list_walks(account_id)

    def get_walk(self, account_id: str, walk_id: str) -> WalkEntry:
        walk = self.repo.get_by_id(account_id, walk_id)
        if walk is None:
            raise WalkNotFound(walk_id)
        return walk

    def get_walks_by_dog_id(self, account_id: str, dog_id: str) -> List[WalkEntry]:
        return self.repo.get_walks_by_dog_id(account_id, dog_id)

    def remove_walk(self, account_id: str, walk_id: str) -> None:
        walk = self.get_walk(account_id, walk_id)
        self.repo.delete(walk)
        logger.info(f"Удалена прогулка id={walk_id}, account_id={account_id}")

    def clear_all(self, account_id: str) -> int:
        return self.repo.clear_all(account_id)
