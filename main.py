from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from api import dogs, journal, recommendations, walk_sessions, walks, weather
from infrastructure.database.session import Database
from infrastructure.logging.logger import setup_logger
from tools.recommendations.recommendation_tool import WalkRecommendationService
from tools.walks import WalkSessionManager
from tools.weather.weather_tool import WeatherService

logger = setup_logger("walking_dog")


def create_app(
    db: Optional[Database] = None,
    walk_sessions_manager: Optional[WalkSessionManager] = None,
    weather_service: Optional[WeatherService] = None,
    recommendation_service: Optional[WalkRecommendationService] = None,
) -> FastAPI:
    app = FastAPI(
        title="The Walking Dog",
        version="0.1.0",
        description="Куда пойдём гулять сегодня?"
    )

    app.state.db = db or Database.get_instance()
    app.state.walk_sessions = walk_sessions_manager or WalkSessionManager()
    app.state.weather_service = weather_service or WeatherService()
    app.state.recommendation_service = recommendation_service or WalkRecommendationService()

    # Разрешаем доступ с телефона
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем эндпоинты
    app.include_router(dogs.router)
    app.include_router(walks.router)
    app.include_router(walk_sessions.router)
    app.include_router(weather.router)
    app.include_router(recommendations.router)
    app.include_router(journal.router)

    @app.get("/")
    def root():
        return {"status": "ok"}

    @app.on_event("startup")
    async def create_schema():
        app.state.db.create_schema()
        logger.info("Схема базы готова")

    @app.on_event("shutdown")
    async def stop_walks():
        await app.state.walk_sessions.shutdown()

    return app


app = create_app()
