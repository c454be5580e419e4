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
Схемы для эндпоинта /dogs.

Регистрация собаки, правка профиля и ответ с профилем.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from models.dog_enums import DogGender


class DogCreate(BaseModel):
    """
    Форма регистрации собаки.

    Нужна дата рождения (born) или возраст (age). Если передано оба,
    возраст пересчитывается из даты рождения.
    """
    name: str
    breed: str
    gender: DogGender = DogGender.MALE
    born: Optional[date] = None
    age: Optional[int] = None
    weight: Optional[float] = None
    photo: Optional[str] = None


class DogUpdate(BaseModel):
    """Правка профиля: передаются только изменённые поля."""
    name: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[DogGender] = None
    born: Optional[date] = None
    age: Optional[int] = None
    weight: Optional[float] = None
    photo: Optional[str] = None


class DogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    breed: str
    age: int
    born: Optional[date] = None
    gender: DogGender
    weight: Optional[float] = None
    photo: Optional[str] = None
    created_at: datetime
