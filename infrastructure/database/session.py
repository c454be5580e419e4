from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from infrastructure.logging.logger import setup_logger
from settings import settings

logger = setup_logger("database")


class Database:
    _instance: Optional["Database"] = None

    def __init__(self, db_url: Optional[str] = None):
        self.db_url = db_url or settings.DATABASE_URL

        engine_kwargs = {"future": True}
        if self.db_url.startswith("sqlite"):
            # SQLite-соединение используется из потоков FastAPI
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.db_url in ("sqlite://", "sqlite:///:memory:"):
                # in-memory база живёт, пока жив единственный коннект
                engine_kwargs["poolclass"] = StaticPool

        # Синхронный движок и сессия
        self.engine = create_engine(self.db_url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    @classmethod
    def get_instance(cls) -> "Database":
        """Общий на процесс экземпляр с настройками из settings."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_session(self) -> Session:
        return self.SessionLocal()

    def create_schema(self) -> None:
        """Создаёт таблицы всех доменных моделей, если их ещё нет."""
        # Импорт регистрирует модели в Base.metadata
        from infrastructure.database.models import Base
        import tools.dogs.models  # noqa: F401
        import tools.walks.models  # noqa: F401

        Base.metadata.create_all(self.engine)
        logger.info(f"Схема БД готова: {sorted(Base.metadata.tables)}")
