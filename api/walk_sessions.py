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
Живая прогулка: старт, поток GPS-точек, пауза, завершение.

Состояние идущих прогулок хранится в WalkSessionManager (app.state),
в базу попадает только итог после /finish.
"""

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from api.dependencies.runtime import get_db, get_walk_sessions
from api.helpers import to_walk_response
from api.schemas.common import GeoLocation, StatusResponse
from api.schemas.walk_sessions import (
    WalkLocationUpdate,
    WalkSessionFinished,
    WalkSessionStart,
    WalkSessionState,
)
from infrastructure.logging.logger import setup_logger
from tools.dogs import DogNotFound, DogService
from tools.walks import (
    ActiveWalk,
    LocationFix,
    NoLocationFix,
    WalkService,
    WalkSessionNotFound,
    WalkSessionStateError,
)

logger = setup_logger("walk_sessions")

router = APIRouter(prefix="/api/walk_sessions", tags=["walks"])


def _to_fix(location: GeoLocation) -> LocationFix:
    return LocationFix(
        latitude=location.lat,
        longitude=location.lon,
        timestamp=location.timestamp,
        accuracy=location.accuracy,
    )


def _to_state(active: ActiveWalk) -> WalkSessionState:
    return WalkSessionState.model_validate(active.snapshot())


@router.post("", response_model=WalkSessionState, status_code=status.HTTP_201_CREATED)
async def start_walk(account_id: str, payload: WalkSessionStart, db=Depends(get_db), walk_sessions=Depends(get_walk_sessions)):
    """
    Начинает прогулку с текущей GPS-точки.

    Raises:
        HTTPException 404: собака не найдена
        HTTPException 400: нет стартовой точки
    """
    with db.get_session() as session:
        try:
            DogService(session).get_dog(account_id, payload.dog_id)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)

    fix = _to_fix(payload.location) if payload.location else None
    suggestion = payload.suggestion.model_dump(mode="json") if payload.suggestion else None

    try:
        active = await walk_sessions.open(account_id, payload.dog_id, fix=fix, suggestion=suggestion)
    except NoLocationFix as exc:
        raise HTTPException(status_code=400, detail=exc.message)

    return _to_state(active)


@router.get("/{session_id}", response_model=WalkSessionState)
async def get_walk_state(session_id: str, account_id: str, walk_sessions=Depends(get_walk_sessions)):
    """Текущие дистанция, время и состояние прогулки."""
    try:
        return _to_state(walk_sessions.get(session_id, account_id))
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)


@router.post("/{session_id}/location", response_model=WalkSessionState)
async def push_location(
    session_id: str,
    account_id: str,
    payload: WalkLocationUpdate,
    walk_sessions=Depends(get_walk_sessions),
):
    """Точки применяются по порядку. На паузе они только обновляют позицию."""
    try:
        active = walk_sessions.get(session_id, account_id)
        for point in payload.points:
            active = walk_sessions.push_location(session_id, _to_fix(point), account_id)
        return _to_state(active)
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)


@router.post("/{session_id}/pause", response_model=WalkSessionState)
async def pause_walk(session_id: str, account_id: str, walk_sessions=Depends(get_walk_sessions)):
    try:
        return _to_state(walk_sessions.pause(session_id, account_id))
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except WalkSessionStateError as exc:
        raise HTTPException(status_code=409, detail=exc.message)


@router.post("/{session_id}/resume", response_model=WalkSessionState)
async def resume_walk(session_id: str, account_id: str, walk_sessions=Depends(get_walk_sessions)):
    try:
        return _to_state(walk_sessions.resume(session_id, account_id))
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except WalkSessionStateError as exc:
        raise HTTPException(status_code=409, detail=exc.message)


@router.post("/{session_id}/finish", response_model=WalkSessionFinished)
async def finish_walk(
    session_id: str,
    account_id: str,
    db=Depends(get_db),
    walk_sessions=Depends(get_walk_sessions),
):
    """
    Останавливает таймер и сохраняет прогулку в журнал.

    Если запись не удалась, сессия остаётся, и /finish можно повторить.
    """
    try:
        active, summary = await walk_sessions.finish(session_id, account_id)
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except WalkSessionStateError as exc:
        raise HTTPException(status_code=409, detail=exc.message)

    with db.get_session() as session:
        try:
            walk = WalkService(session).save_summary(account_id, summary)
            result = WalkSessionFinished(session=_to_state(active), walk=to_walk_response(walk))
            walk_sessions.release(session_id, account_id)
            return result
        except Exception as exc:
            session.rollback()
            logger.error(f"[walk_sessions] Ошибка при сохранении прогулки {session_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при сохранении прогулки: {exc}")


@router.delete("/{session_id}", response_model=StatusResponse)
async def discard_walk(session_id: str, account_id: str, walk_sessions=Depends(get_walk_sessions)):
    """Бросает прогулку без записи в журнал."""
    try:
        await walk_sessions.discard(session_id, account_id)
        return StatusResponse(deleted=1)
    except WalkSessionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
