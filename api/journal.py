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


from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies.runtime import get_db
from api.helpers import to_walk_responses
from api.schemas.journal import JournalCalendar, JournalDay, JournalSummary
from infrastructure.logging.logger import setup_logger
from tools.walks import JournalService
from tools.walks.formatting import format_distance, format_journal_duration

logger = setup_logger("journal")
router = APIRouter(prefix="/api/journal", tags=["journal"])


@router.get("/day", response_model=JournalDay)
def get_day(account_id: str, day: date, dog_id: Optional[str] = None, db=Depends(get_db)):
    """Прогулки за выбранный в календаре день."""
    with db.get_session() as session:
        try:
            walks = JournalService(session).get_day(account_id, day, dog_id=dog_id)
            return JournalDay(date=day, walks=to_walk_responses(walks))
        except Exception as exc:
            logger.error(f"[journal] Ошибка при получении дня {day} для {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при получении дневника: {exc}")


@router.get("/calendar", response_model=JournalCalendar)
def get_calendar(
    account_id: str,
    year: int = Query(..., ge=1),
    month: int = Query(...),
    dog_id: Optional[str] = None,
    db=Depends(get_db),
):
    """Дни месяца с прогулками: количество, дистанция, время."""
    with db.get_session() as session:
        try:
            return JournalService(session).get_calendar(account_id, year, month, dog_id=dog_id)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        except Exception as exc:
            logger.error(f"[journal] Ошибка календаря {year}-{month} для {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при получении календаря: {exc}")


@router.get("/summary", response_model=JournalSummary)
def get_summary(account_id: str, dog_id: Optional[str] = None, db=Depends(get_db)):
    with db.get_session() as session:
        try:
            summary = JournalService(session).get_summary(account_id, dog_id=dog_id)
            return JournalSummary(
                total_walks=summary["total_walks"],
                total_distance=summary["total_distance"],
                total_duration=summary["total_duration"],
                total_distance_text=format_distance(summary["total_distance"]),
                total_duration_text=format_journal_duration(summary["total_duration"] // 60),
                recent=to_walk_responses(summary["recent"]),
            )
        except Exception as exc:
            logger.error(f"[journal] Ошибка сводки для {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при получении сводки: {exc}")
