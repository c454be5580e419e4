import os

from pydantic.v1 import ConfigDict
from pydantic_settings import BaseSettings
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()  # Загружаем .env, если он есть

# Используем переменную окружения или текущую рабочую директорию
BASE_DIR = Path(os.getenv("WALKING_DOG_ROOT", os.getcwd())).resolve()

class Settings(BaseSettings):
    BASE_DIR: Path = BASE_DIR

    # База данных (по умолчанию локальный SQLite-файл)
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'walking_dog.db'}")

    # Папка для логов
    LOG_DIR: Path = BASE_DIR / os.getenv("LOG_DIR", "logs")

    # OpenRouter (рекомендации прогулок)
    OPENROUTER_API_KEY: str | None = os.getenv("OPENROUTER_API_KEY")
    OPENROUTER_BASE_URL: str = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "z-ai/glm-4.5-air:free")

    # Open-Meteo (погода, ключ не нужен)
    OPEN_METEO_BASE_URL: str = os.getenv("OPEN_METEO_BASE_URL", "https://api.open-meteo.com/v1")

    # Шаг таймера прогулки в секундах
    WALK_TICK_SECONDS: float = float(os.getenv("WALK_TICK_SECONDS", "1.0"))

    #Пути к промптам
    RECOMMENDATION_PROMPT_PATH: Path = (Path(__file__).parent / "tools/recommendations/recommendation_prompt.yaml").resolve()

    model_config = ConfigDict(env_file=".env")


settings = Settings()
