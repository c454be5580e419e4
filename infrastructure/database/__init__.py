"""
Database infrastructure package.

Экспортирует движок/сессии, декларативную базу и базовый репозиторий.
Доменные модели и репозитории живут в соответствующих tools:
- tools/dogs/
- tools/walks/
"""

from .models import Base
from .session import Database
from .repositories import BaseRepository

__all__ = [
    "Base",
    "Database",
    "BaseRepository",
]
