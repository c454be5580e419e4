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

"""Сервис профилей собак (бизнес-логика регистрации и редактирования)."""

import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from infrastructure.logging.logger import setup_logger
from models.dog_enums import DogGender
from tools.dogs.exceptions import DogNotFound, DogValidationError
from tools.dogs.models import Dog
from tools.dogs.repository import DogRepository

logger = setup_logger("dog_service")

MIN_WEIGHT_KG = 0.1
MAX_WEIGHT_KG = 200.0

EDITABLE_FIELDS = ("name", "breed", "gender", "born", "age", "weight", "photo")


def calculate_age(born: date, today: Optional[date] = None) -> int:
    """
    Возраст в полных годах на сегодня.

    Если день рождения в этом году ещё не наступил, вычитаем год.
    Отрицательный возраст не возвращается.
    """
    today = today or date.today()
    years = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        years -= 1
    return max(0, years)


class DogService:
    """Сервис для управления собаками пользователя."""

    def __init__(self, session: Session):
        self.session = session
        self.repo = DogRepository(session)

    def add_dog(
        self,
        account_id: str,
        name: str,
        breed: str,
        gender: str,
        born: Optional[date] = None,
        age: Optional[int] = None,
        weight: Optional[float] = None,
        photo: Optional[str] = None,
    ) -> Dog:
        """
        Регистрирует новую собаку.

        Возраст берётся из даты рождения, если она передана, иначе из age.

        Raises:
            DogValidationError: если данные профиля некорректны
        """
        fields = self._validate(
            {
                "name": name,
                "breed": breed,
                "gender": gender,
                "born": born,
                "age": age,
                "weight": weight,
                "photo": photo,
            }
        )
        if fields.get("born") is None and fields.get("age") is None:
            raise DogValidationError("born", "Birth date or age is required")

        dog = Dog(id=uuid.uuid4().hex, account_id=account_id, **fields)
        return self.repo.add(dog)

    def list_dogs(self, account_id: str) -> List[Dog]:
        return self.repo.list_dogs(account_id)

    def get_dog(self, account_id: str, dog_id: str) -> Dog:
        dog = self.repo.get_by_id(account_id, dog_id)
        if dog is None:
            raise DogNotFound(dog_id)
        return dog

    def update_dog(self, account_id: str, dog_id: str, **changes: Any) -> Dog:
        """
        Применяет явные правки пользователя к профилю.

        Передавать нужно только изменённые поля; None у name/breed/gender
        считается отсутствием правки.
        """
        dog = self.get_dog(account_id, dog_id)

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise DogValidationError(sorted(unknown)[0], "Field is not editable")

        fields = self._validate(changes)
        for key, value in fields.items():
            setattr(dog, key, value)

        dog = self.repo.update(dog)
        logger.info(f"Обновлена собака id={dog_id}: {sorted(fields)}")
        return dog

    def remove_dog(self, account_id: str, dog_id: str) -> None:
        # Прогулки собаки остаются в журнале
        dog = self.get_dog(account_id, dog_id)
        self.repo.delete(dog)
        logger.info(f"Удалена собака id={dog_id}, account_id={account_id}")

    def clear_all(self, account_id: str) -> int:
        return self.repo.clear_all(account_id)

    def _validate(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        """Проверяет и нормализует переданные поля, пропуская отсутствующие."""
        fields: Dict[str, Any] = {}

        for key in ("name", "breed"):
            if raw.get(key) is None:
                continue
            value = str(raw[key]).strip()
            if not value:
                raise DogValidationError(key, f"Dog {key} is required")
            fields[key] = value

        gender = raw.get("gender")
        if isinstance(gender, DogGender):
            fields["gender"] = gender.value
        elif gender is not None:
            try:
                fields["gender"] = DogGender.from_str(str(gender)).value
            except ValueError as e:
                raise DogValidationError("gender", str(e))

        if "weight" in raw and raw["weight"] is not None:
            weight = float(raw["weight"])
            if weight < MIN_WEIGHT_KG:
                raise DogValidationError("weight", "Weight must be greater than 0")
            if weight > MAX_WEIGHT_KG:
                raise DogValidationError("weight", "Weight must be less than 200kg")
            fields["weight"] = weight

        if "photo" in raw:
            fields["photo"] = raw["photo"] or None

        if raw.get("born") is not None:
            born = raw["born"]
            if born > date.today():
                raise DogValidationError("born", "Birth date cannot be in the future")
            fields["born"] = born
            fields["age"] = calculate_age(born)
        elif raw.get("age") is not None:
            age = int(raw["age"])
            if age < 0:
                raise DogValidationError("age", "Age cannot be negative")
            fields["age"] = age
            # возраст, заданный вручную, отменяет дату рождения
            fields["born"] = None

        return fields
