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

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Float, Date, Index
from sqlalchemy.orm import relationship

from infrastructure.database.models import Base


# --- прогулка ---
class WalkEntry(Base):
    __tablename__ = "walk_entries"

    id = Column(String, primary_key=True)
    account_id = Column(String, nullable=False, index=True)
    # без FK: запись переживает удаление собаки
    dog_id = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False)  # день прогулки (YYYY-MM-DD)
    time = Column(DateTime, nullable=False)  # момент окончания
    distance = Column(Float, nullable=False, default=0.0)  # метры
    duration = Column(Integer, nullable=False, default=0)  # секунды
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    path_points = relationship(
        "WalkPathPoint",
        back_populates="walk",
        order_by="WalkPathPoint.seq",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_walk_entries_account_date", "account_id", "date"),
    )

    @property
    def path(self):
        return [[p.lon, p.lat] for p in self.path_points]


# --- точки пути ---
class WalkPathPoint(Base):
    __tablename__ = "walk_path_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    walk_id = Column(String, ForeignKey("walk_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    seq = Column(Integer, nullable=False)
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)

    walk = relationship("WalkEntry", back_populates="path_points")
