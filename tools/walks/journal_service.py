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

"""Журнал прогулок: день, календарь месяца, сводка."""

import calendar
from collections import OrderedDict
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from infrastructure.logging.logger import setup_logger
from tools.walks.models import WalkEntry
from tools.walks.repository import WalkRepository

logger = setup_logger("journal_service")


class JournalService:
    """Сервис для чтения журнала прогулок пользователя."""

    RECENT_LIMIT = 5

    def __init__(self, session: Session):
        self.session = session
        self.repo = WalkRepository(session)

    def get_day(self, account_id: str, day: date, dog_id: Optional[str] = None) -> List[WalkEntry]:
        """Прогулки за выбранный день, в порядке времени."""
        return self.repo.get_walks_between(account_id, day, day, dog_id=dog_id)

    def get_calendar(
        self,
        account_id: str,
        year: int,
        month: int,
        dog_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Календарь месяца: только дни, в которые были прогулки.

        Args:
            account_id: ID пользователя
            year: Год
            month: Месяц (1-12)
            dog_id: Фильтр по собаке (опционально)

        Returns:
            Dict с year, month и days: {"YYYY-MM-DD": {walks, distance, duration}}
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be 1..12, got {month}")

        last_day = calendar.monthrange(year, month)[1]
        walks = self.repo.get_walks_between(
            account_id,
            date(year, month, 1),
            date(year, month, last_day),
            dog_id=dog_id,
        )

        days: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        for walk in sorted(walks, key=lambda w: w.date):
            key = walk.date.isoformat()
            bucket = days.setdefault(key, {"walks": 0, "distance": 0.0, "duration": 0})
            bucket["walks"] += 1
            bucket["distance"] += walk.distance or 0
            bucket["duration"] += walk.duration or 0

        logger.info(f"Календарь {year}-{month:02d} для {account_id}: {len(days)} дней с прогулками")
        return {"year": year, "month": month, "days": dict(days)}

    def get_summary(
        self,
        account_id: str,
        dog_id: Optional[str] = None,
        recent_limit: int = RECENT_LIMIT,
    ) -> Dict[str, Any]:
        if dog_id:
            walks = self.repo.get_walks_by_dog_id(account_id, dog_id)
        else:
            walks = self.repo.list_walks(account_id)

        return {
            "total_walks": len(walks),
            "total_distance": sum(w.distance or 0 for w in walks),
            "total_duration": sum(w.duration or 0 for w in walks),
            "recent": walks[:recent_limit],
        }
