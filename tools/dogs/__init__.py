"""Dogs module - профили собак."""

from .dog_service import DogService, calculate_age
from .repository import DogRepository
from .exceptions import DogNotFound, DogValidationError

__all__ = [
    "DogService",
    "DogRepository",
    "calculate_age",
    "DogNotFound",
    "DogValidationError",
]
