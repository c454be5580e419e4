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

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Float, Date

from infrastructure.database.models import Base


# --- профиль собаки ---
class Dog(Base):
    __tablename__ = "dogs"

    id = Column(String, primary_key=True)
    account_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    breed = Column(String, nullable=False)
    age = Column(Integer, nullable=False, default=0)  # полных лет
    born = Column(Date, nullable=True)
    gender = Column(String(10), nullable=False)  # male / female
    weight = Column(Float, nullable=True)  # кг
    photo = Column(String, nullable=True)  # URI фото на устройстве
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Dog id={self.id}, name={self.name}, breed={self.breed}, age={self.age}>"
