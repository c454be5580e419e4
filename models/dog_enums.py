from enum import Enum

class DogGender(str, Enum):
    """Пол собаки."""
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_str(cls, gender_str: str) -> "DogGender":
        """
        Преобразует строку в значение enum DogGender.

        Args:
            gender_str (str): Строка, соответствующая значению enum.

        Returns:
            DogGender: Соответствующее значение enum.

        Raises:
            ValueError: Если строка не соответствует ни одному значению enum.
        """
        try:
            return cls(gender_str.strip().lower())
        except ValueError:
            raise ValueError(f"Неизвестный пол собаки: {gender_str}")


class WalkIntensity(str, Enum):
    """Интенсивность рекомендованной прогулки."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WalkState(str, Enum):
    """Состояние трекинга прогулки."""
    IDLE = "idle"
    WALKING = "walking"
    PAUSED = "paused"
    FINISHED = "finished"
