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

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from api.dependencies.runtime import get_db
from api.helpers import to_walk_detail, to_walk_responses
from api.schemas.common import StatusResponse
from api.schemas.walks import WalkCreate, WalkDetailResponse, WalkResponse
from infrastructure.logging.logger import setup_logger
from tools.dogs import DogNotFound
from tools.walks import WalkNotFound, WalkService, WalkValidationError

logger = setup_logger("walks")

router = APIRouter(prefix="/api/walks", tags=["walks"])


@router.get("", response_model=List[WalkResponse])
def list_walks(account_id: str, dog_id: Optional[str] = None, db=Depends(get_db)):
    """Прогулки пользователя, новые первыми. dog_id фильтрует по собаке."""
    with db.get_session() as session:
        try:
            service = WalkService(session)
            walks = (
                service.get_walks_by_dog_id(account_id, dog_id)
                if dog_id else service.list_walks(account_id)
            )
            return to_walk_responses(walks)
        except Exception as exc:
            logger.error(f"[walks] Ошибка при получении прогулок {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при получении прогулок: {exc}")


@router.post("", response_model=WalkDetailResponse, status_code=status.HTTP_201_CREATED)
def add_walk(account_id: str, payload: WalkCreate, db=Depends(get_db)):
    """
    Сохраняет прогулку в журнал.

    Обычно записи создаёт /api/walk_sessions/{id}/finish, этот эндпоинт
    нужен для импорта прогулок, записанных офлайн.
    """
    with db.get_session() as session:
        try:
            walk = WalkService(session).add_walk(
                account_id=account_id,
                dog_id=payload.dog_id,
                walk_date=payload.date,
                walk_time=payload.time,
                distance=payload.distance,
                duration=payload.duration,
                path=payload.path,
            )
            return to_walk_detail(walk)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)
        except WalkValidationError as exc:
            raise HTTPException(status_code=422, detail=exc.message)
        except Exception as exc:
            session.rollback()
            logger.error(f"[walks] Ошибка при создании прогулки: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при создании прогулки: {exc}")


@router.delete("", response_model=StatusResponse)
def clear_walks(account_id: str, db=Depends(get_db)):
    with db.get_session() as session:
        try:
            deleted = WalkService(session).clear_all(account_id)
            return StatusResponse(deleted=deleted)
        except Exception as exc:
            session.rollback()
            logger.error(f"[walks] Ошибка при очистке журнала {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при удалении прогулок: {exc}")


@router.get("/{walk_id}", response_model=WalkDetailResponse)
def get_walk(walk_id: str, account_id: str, db=Depends(get_db)):
    """Прогулка с маршрутом."""
    with db.get_session() as session:
        try:
            return to_walk_detail(WalkService(session).get_walk(account_id, walk_id))
        except WalkNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)


@router.delete("/{walk_id}", response_model=StatusResponse)
def remove_walk(walk_id: str, account_id: str, db=Depends(get_db)):
    with db.get_session() as session:
        try:
            WalkService(session).remove_walk(account_id, walk_id)
            return StatusResponse(deleted=1)
        except WalkNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)
        except Exception as exc:
            session.rollback()
            logger.error(f"[walks] Ошибка при удалении прогулки {walk_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при удалении прогулки: {exc}")
