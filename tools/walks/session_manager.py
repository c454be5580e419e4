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
Менеджер активных прогулок.

Держит в памяти трекеры идущих прогулок и для каждой запускает
asyncio-задачу, которая раз в секунду вызывает tick(). Всё работает
в одном event loop, поэтому блокировки не нужны.
"""

import asyncio
import contextlib
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from infrastructure.logging.logger import setup_logger
from settings import settings
from tools.walks.exceptions import WalkSessionNotFound
from tools.walks.tracker import LocationFix, WalkSummary, WalkTracker

logger = setup_logger("walk_session_manager")


@dataclass
class ActiveWalk:
    session_id: str
    account_id: str
    tracker: WalkTracker
    suggestion: Optional[Dict[str, Any]] = None
    summary: Optional[WalkSummary] = None
    ticker: Optional[asyncio.Task] = field(default=None, repr=False)

    def snapshot(self) -> Dict[str, Any]:
        data = self.tracker.snapshot()
        data["session_id"] = self.session_id
        data["suggestion"] = self.suggestion
        return data


class WalkSessionManager:
    """Реестр активных прогулок с секундными таймерами."""

    def __init__(self, tick_seconds: Optional[float] = None):
        self.tick_seconds = tick_seconds if tick_seconds is not None else settings.WALK_TICK_SECONDS
        self._sessions: Dict[str, ActiveWalk] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def open(
        self,
        account_id: str,
        dog_id: str,
        fix: Optional[LocationFix] = None,
        suggestion: Optional[Dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> ActiveWalk:
        """
        Начинает прогулку и запускает её таймер.

        Raises:
            NoLocationFix: если нет стартовой GPS-точки
        """
        tracker = WalkTracker(dog_id=dog_id)
        tracker.start(fix, now=now)

        active = ActiveWalk(
            session_id=uuid.uuid4().hex,
            account_id=account_id,
            tracker=tracker,
            suggestion=suggestion,
        )
        active.ticker = asyncio.get_running_loop().create_task(self._run_ticker(active))
        self._sessions[active.session_id] = active

        logger.info(f"Прогулка начата: session={active.session_id}, account_id={account_id}, dog_id={dog_id}")
        return active

    def get(self, session_id: str, account_id: Optional[str] = None) -> ActiveWalk:
        active = self._sessions.get(session_id)
        if active is None or (account_id is not None and active.account_id != account_id):
            raise WalkSessionNotFound(session_id)
        return active

    def push_location(self, session_id: str, fix: LocationFix, account_id: Optional[str] = None) -> ActiveWalk:
        active = self.get(session_id, account_id)
        added = active.tracker.update_location(fix)
        if added:
            logger.debug(f"[{session_id}] +{added:.1f}m, всего {active.tracker.distance:.1f}m")
        return active

    def pause(self, session_id: str, account_id: Optional[str] = None) -> ActiveWalk:
        active = self.get(session_id, account_id)
        active.tracker.pause()
        logger.info(f"Прогулка на паузе: session={session_id}")
        return active

    def resume(self, session_id: str, account_id: Optional[str] = None) -> ActiveWalk:
        active = self.get(session_id, account_id)
        active.tracker.resume()
        logger.info(f"Прогулка продолжена: session={session_id}")
        return active

    async def finish(
        self,
        session_id: str,
        account_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Tuple[ActiveWalk, WalkSummary]:
        """
        Останавливает таймер и возвращает итог прогулки.

        Сессия остаётся в реестре, пока итог не сохранён (см. release),
        поэтому повторный вызов отдаёт тот же итог.
        """
        active = self.get(session_id, account_id)
        if active.summary is not None:
            return active, active.summary

        active.summary = active.tracker.finish(now=now)
        await self._stop_ticker(active)

        logger.info(
            f"Прогулка завершена: session={session_id}, distance={active.summary.distance:.1f}m, "
            f"duration={active.summary.duration}s"
        )
        return active, active.summary

    def release(self, session_id: str, account_id: Optional[str] = None) -> None:
        """Убирает завершённую прогулку из реестра после записи в журнал."""
        active = self.get(session_id, account_id)
        self._sessions.pop(active.session_id, None)

    async def discard(self, session_id: str, account_id: Optional[str] = None) -> None:
        """Бросает прогулку без сохранения (клиент ушёл с экрана)."""
        active = self.get(session_id, account_id)
        await self._stop(active)
        logger.info(f"Прогулка отменена: session={session_id}")

    async def shutdown(self) -> None:
        for active in list(self._sessions.values()):
            await self._stop(active)
        logger.info("Все таймеры прогулок остановлены")

    async def _stop(self, active: ActiveWalk) -> None:
        self._sessions.pop(active.session_id, None)
        await self._stop_ticker(active)

    async def _stop_ticker(self, active: ActiveWalk) -> None:
        if active.ticker is not None and not active.ticker.done():
            active.ticker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await active.ticker
        active.ticker = None

    async def _run_ticker(self, active: ActiveWalk) -> None:
        while active.tracker.is_active:
            await asyncio.sleep(self.tick_seconds)
            active.tracker.tick()
