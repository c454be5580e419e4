"""
Общие репозитории базы данных.

Domain-specific репозитории должны находиться в соответствующих tools:
- tools/dogs/repository.py
- tools/walks/repository.py
"""

from .base import BaseRepository

__all__ = [
    "BaseRepository",
]
