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

"""Репозиторий для работы с профилями собак."""

from typing import List

from sqlalchemy.orm import Session

from infrastructure.database.repositories import BaseRepository
from infrastructure.logging.logger import setup_logger
from tools.dogs.models import Dog

logger = setup_logger("dog_repository")


class DogRepository(BaseRepository[Dog]):
    """Репозиторий собак пользователя."""

    def __init__(self, session: Session):
        super().__init__(session, Dog)

    def list_dogs(self, account_id: str) -> List[Dog]:
        """Все собаки аккаунта в порядке добавления."""
        return (
            self.session.query(Dog)
            .filter(Dog.account_id == account_id)
            .order_by(Dog.created_at.asc(), Dog.id.asc())
            .all()
        )

    def add(self, dog: Dog) -> Dog:
        dog = self.create(dog)
        logger.info(f"Добавлена собака: id={dog.id}, account_id={dog.account_id}, name={dog.name}")
        return dog

    def clear_all(self, account_id: str) -> int:
        deleted = self.delete_all(account_id)
        logger.info(f"Удалены все собаки account_id={account_id}: {deleted}")
        return deleted
