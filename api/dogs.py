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

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from api.dependencies.runtime import get_db
from api.schemas.common import StatusResponse
from api.schemas.dogs import DogCreate, DogResponse, DogUpdate
from infrastructure.logging.logger import setup_logger
from tools.dogs import DogNotFound, DogService, DogValidationError

logger = setup_logger("dogs")

router = APIRouter(prefix="/api/dogs", tags=["dogs"])


@router.get("", response_model=List[DogResponse])
def list_dogs(account_id: str, db=Depends(get_db)):
    """Все собаки пользователя в порядке регистрации."""
    with db.get_session() as session:
        try:
            return DogService(session).list_dogs(account_id)
        except Exception as exc:
            logger.error(f"[dogs] Ошибка при получении собак {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при получении собак: {exc}")


@router.post("", response_model=DogResponse, status_code=status.HTTP_201_CREATED)
def add_dog(account_id: str, payload: DogCreate, db=Depends(get_db)):
    """
    Регистрирует собаку.

    Возраст считается из даты рождения (полных лет на сегодня).

    Raises:
        HTTPException 422: некорректные данные формы
        HTTPException 500: внутренняя ошибка
    """
    with db.get_session() as session:
        try:
            return DogService(session).add_dog(account_id=account_id, **payload.model_dump())
        except DogValidationError as exc:
            raise HTTPException(status_code=422, detail={"field": exc.field, "message": exc.message})
        except Exception as exc:
            session.rollback()
            logger.error(f"[dogs] Ошибка при регистрации собаки для {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при регистрации собаки: {exc}")


@router.delete("", response_model=StatusResponse)
def clear_dogs(account_id: str, db=Depends(get_db)):
    with db.get_session() as session:
        try:
            deleted = DogService(session).clear_all(account_id)
            return StatusResponse(deleted=deleted)
        except Exception as exc:
            session.rollback()
            logger.error(f"[dogs] Ошибка при очистке собак {account_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при удалении собак: {exc}")


@router.get("/{dog_id}", response_model=DogResponse)
def get_dog(dog_id: str, account_id: str, db=Depends(get_db)):
    with db.get_session() as session:
        try:
            return DogService(session).get_dog(account_id, dog_id)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)


@router.patch("/{dog_id}", response_model=DogResponse)
def update_dog(dog_id: str, account_id: str, payload: DogUpdate, db=Depends(get_db)):
    """Явная правка профиля собаки: меняются только переданные поля."""
    changes = payload.model_dump(exclude_unset=True)
    with db.get_session() as session:
        try:
            return DogService(session).update_dog(account_id, dog_id, **changes)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)
        except DogValidationError as exc:
            session.rollback()
            raise HTTPException(status_code=422, detail={"field": exc.field, "message": exc.message})
        except Exception as exc:
            session.rollback()
            logger.error(f"[dogs] Ошибка при обновлении собаки {dog_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при обновлении собаки: {exc}")


@router.delete("/{dog_id}", response_model=StatusResponse)
def remove_dog(dog_id: str, account_id: str, db=Depends(get_db)):
    """Удаляет собаку. Её прогулки остаются в журнале."""
    with db.get_session() as session:
        try:
            DogService(session).remove_dog(account_id, dog_id)
            return StatusResponse(deleted=1)
        except DogNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)
        except Exception as exc:
            session.rollback()
            logger.error(f"[dogs] Ошибка при удалении собаки {dog_id}: {exc}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Ошибка при удалении собаки: {exc}")
