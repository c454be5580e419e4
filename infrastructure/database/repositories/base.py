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
Базовый репозиторий со списочным CRUD по аккаунту.

Доменные репозитории (tools/dogs/repository.py, tools/walks/repository.py)
наследуются от него и добавляют свои выборки.
"""

from typing import TypeVar, Generic, Type, Optional
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Базовый репозиторий с типовыми операциями над записями аккаунта.

    Модель обязана иметь поля id и account_id.
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def get_by_id(self, account_id: str, id: str) -> Optional[T]:
        """Получает запись аккаунта по ID."""
        return (
            self.session.query(self.model)
            .filter_by(account_id=account_id, id=id)
            .first()
        )

    def create(self, entity: T) -> T:
        """Создаёт новую запись."""
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def update(self, entity: T) -> T:
        """Сохраняет изменения существующей записи."""
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        """Удаляет запись."""
        self.session.delete(entity)
        self.session.commit()

    def delete_all(self, account_id: str) -> int:
        """Удаляет все записи аккаунта, возвращает количество удалённых."""
        deleted = (
            self.session.query(self.model)
            .filter_by(account_id=account_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def exists(self, **filters) -> bool:
        """Проверяет существование записи по фильтрам."""
        return self.session.query(
            self.session.query(self.model).filter_by(**filters).exists()
        ).scalar()
